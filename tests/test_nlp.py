import pytest

from warpish.nlp import InputType, NaturalLanguageDetector


@pytest.fixture
def detector():
    return NaturalLanguageDetector()


def test_known_commands_are_commands(detector):
    assert detector.detect("ls -la").input_type is InputType.COMMAND
    assert detector.detect("git status").input_type is InputType.COMMAND


def test_question_mark_makes_a_question(detector):
    assert detector.detect("how do I list files?").input_type is InputType.QUESTION


def test_intent_detection(detector):
    assert detector.detect("how do I create a file?").intent == "help"
    assert detector.detect("show me disk space").intent == "system_info"
    assert detector.detect("please delete file now").intent == "file_operation"
    assert detector.detect("ls -la").intent is None


def test_request_detection(detector):
    assert detector.detect("please make a build").input_type is InputType.REQUEST
    assert detector.detect("Can you list things").input_type is InputType.REQUEST


def test_natural_language_detection(detector):
    result = detector.detect("show help")
    assert result.input_type is InputType.NATURAL_LANGUAGE
    assert result.confidence == pytest.approx(0.5)


def test_mixed_input(detector):
    result = detector.detect("foo bar baz qux zed one")
    assert result.input_type is InputType.MIXED


def test_empty_input(detector):
    result = detector.detect("   ")
    assert result.input_type is InputType.COMMAND
    assert result.confidence == 0.0
    assert result.entities == []
    assert result.intent is None


def test_command_confidence_and_complexity(detector):
    result = detector.detect("ls -la")
    assert result.confidence == pytest.approx(0.6)
    assert result.complexity == pytest.approx(0.1)
    assert result.sentiment is None
    assert result.entities == []


def test_question_confidence(detector):
    result = detector.detect("how are you")
    assert result.confidence == pytest.approx(1 / 6 + 0.2)


def test_entities(detector):
    assert detector.detect("open /tmp/notes.txt").entities == ["file", "path"]
    assert detector.detect("visit https://example.com").entities == ["path", "url"]


def test_sentiment(detector):
    assert detector.detect("love awesome").sentiment == pytest.approx(1.0)
    assert detector.detect("this is great but awful").sentiment == pytest.approx(0.0)
    assert detector.detect("terrible").sentiment == pytest.approx(-1.0)


def test_complexity_with_punctuation_and_terms(detector):
    assert detector.detect("class, method").complexity == pytest.approx(0.5)


def test_complexity_is_capped(detector):
    text = " ".join(["algorithm database function variable object class method,"] * 5)
    assert detector.detect(text).complexity == pytest.approx(1.0)


def test_confidence_never_exceeds_one(detector):
    result = detector.detect("how how how how how how?")
    assert 0.0 <= result.confidence <= 1.0