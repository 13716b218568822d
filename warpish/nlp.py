"""Tell shell commands apart from natural-language requests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

_COMMANDS = frozenset(
    {
        # Common Unix commands
        "ls", "cd", "pwd", "mkdir", "rmdir", "rm", "cp", "mv", "cat", "grep",
        "find", "sed", "awk", "sort", "uniq", "head", "tail", "less", "more",
        "ps", "top", "kill", "df", "du", "mount", "umount", "chmod", "chown",
        "tar", "gzip", "gunzip", "zip", "unzip", "wget", "curl", "ssh", "scp",
        # Version control
        "git", "svn", "hg",
        # Package managers
        "apt", "yum", "brew", "cargo", "npm", "pip", "gem",
        # Programming tools
        "make", "cmake", "gcc", "clang", "python", "node", "java", "rustc",
    }
)

_NL_INDICATORS = frozenset(
    {
        "how", "what", "why", "when", "where", "who", "which", "can", "could",
        "would", "should", "please", "help", "explain", "show", "tell", "find",
        "search", "look", "create", "make", "build", "install", "update", "fix",
    }
)

# Checked in this order; the first intent with a matching phrase wins.
_INTENT_PATTERNS: dict[str, tuple[str, ...]] = {
    "help": ("how do i", "how to", "help me", "what is", "explain"),
    "file_operation": (
        "create file",
        "delete file",
        "copy file",
        "move file",
        "find file",
    ),
    "system_info": (
        "system information",
        "disk space",
        "memory usage",
        "cpu usage",
        "running processes",
    ),
}

_POSITIVE_WORDS = ("good", "great", "excellent", "amazing", "love", "like", "awesome", "fantastic")
_NEGATIVE_WORDS = ("bad", "terrible", "awful", "hate", "dislike", "horrible", "worst", "sucks")
_TECHNICAL_TERMS = ("algorithm", "database", "function", "variable", "object", "class", "method")


class InputType(Enum):
    COMMAND = "Command"
    NATURAL_LANGUAGE = "NaturalLanguage"
    MIXED = "Mixed"
    QUESTION = "Question"
    REQUEST = "Request"


@dataclass
class LanguageDetectionResult:
    """How an input line was classified and what was found in it."""

    input_type: InputType
    confidence: float
    detected_language: str | None = None
    intent: str | None = None
    entities: list[str] = field(default_factory=list)
    sentiment: float | None = None
    complexity: float = 0.0


def _nl_score(words: list[str]) -> float:
    score = float(sum(1 for word in words if word in _NL_INDICATORS))
    if len(words) > 5:
        score += 0.2
    if any("?" in word for word in words):
        score += 0.3
    return min(score / len(words), 1.0)


def _detect_intent(text: str) -> str | None:
    for intent, patterns in _INTENT_PATTERNS.items():
        if any(pattern in text for pattern in patterns):
            return intent
    return None


def _extract_entities(text: str) -> list[str]:
    entities = []
    if any(ext in text for ext in (".txt", ".rs", ".py")):
        entities.append("file")
    if "/" in text or "\\" in text:
        entities.append("path")
    if "http" in text or "www" in text:
        entities.append("url")
    return entities


def _determine_input_type(text: str, command_score: float, nl_score: float) -> InputType:
    if "?" in text or text.startswith(("what", "how", "why")):
        return InputType.QUESTION
    if "please" in text or text.startswith(("can you", "could you")):
        return InputType.REQUEST
    if command_score > 0.7 and nl_score < 0.3:
        return InputType.COMMAND
    if nl_score > 0.5:
        return InputType.NATURAL_LANGUAGE
    return InputType.MIXED


def _sentiment(text: str) -> float | None:
    positive = sum(1 for word in _POSITIVE_WORDS if word in text)
    negative = sum(1 for word in _NEGATIVE_WORDS if word in text)
    if positive == 0 and negative == 0:
        return None
    return (positive - negative) / (positive + negative)


def _complexity(text: str) -> float:
    complexity = min(len(text.split()) / 20.0, 1.0)
    if any(mark in text for mark in ",;:"):
        complexity += 0.2
    complexity += 0.1 * sum(1 for term in _TECHNICAL_TERMS if term in text)
    return min(complexity, 1.0)


def _confidence(command_score: float, nl_score: float, text: str) -> float:
    confidence = (command_score + nl_score) / 2.0
    if text.startswith(("how", "what", "why")):
        confidence += 0.2
    if command_score > 0.8:
        confidence += 0.1
    return min(confidence, 1.0)


class NaturalLanguageDetector:
    """Classifies an input line as a command, a question, a request and so on."""

    def detect(self, text: str) -> LanguageDetectionResult:
        lowered = text.lower()
        words = lowered.split()
        if not words:
            return LanguageDetectionResult(input_type=InputType.COMMAND, confidence=0.0)

        command_score = 1.0 if words[0] in _COMMANDS else 0.0
        nl_score = _nl_score(words)

        return LanguageDetectionResult(
            input_type=_determine_input_type(lowered, command_score, nl_score),
            confidence=_confidence(command_score, nl_score, lowered),
            intent=_detect_intent(lowered),
            entities=_extract_entities(lowered),
            sentiment=_sentiment(lowered),
            complexity=_complexity(lowered),
        )