"""Multiple choice questions asked and scored on a text stream."""

from __future__ import annotations

import dataclasses
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import TextIO


class QuestionDifficulty(Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


@dataclass
class QuestionResponse:
    question_id: str
    selected_answer: int
    is_correct: bool
    response_time: int
    timestamp: datetime


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_choice(line: str) -> int | None:
    text = line.strip()
    if text.startswith("+"):
        text = text[1:]
    if text and text.isascii() and text.isdigit():
        return int(text)
    return None


@dataclass
class MultipleChoiceQuestion:
    id: str
    question: str
    options: list[str]
    correct_answer: int
    difficulty: QuestionDifficulty
    category: str
    explanation: str | None = None
    time_limit: int | None = None

    def with_explanation(self, explanation: str) -> MultipleChoiceQuestion:
        return dataclasses.replace(self, explanation=explanation)

    def with_time_limit(self, time_limit: int) -> MultipleChoiceQuestion:
        return dataclasses.replace(self, time_limit=time_limit)

    def ask(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int | None:
        """Show the question and read answers until a valid one is given.

        Returns the zero-based option index, or None if input runs out.
        """
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout

        stdout.write(f"\n{self.question}\n")
        stdout.write(f"Category: {self.category} | Difficulty: {self.difficulty.value}\n")
        if self.time_limit is not None:
            stdout.write(f"Time limit: {self.time_limit} seconds\n")
        stdout.write("\n")
        for number, option in enumerate(self.options, start=1):
            stdout.write(f"{number}. {option}\n")

        count = len(self.options)
        while True:
            stdout.write(f"\nSelect your answer (1-{count}): ")
            stdout.flush()
            line = stdin.readline()
            if not line:
                return None
            choice = _parse_choice(line)
            if choice is not None and 0 < choice <= count:
                return choice - 1
            stdout.write("Invalid selection, try again.\n")

    def evaluate(self, answer: int) -> bool:
        return answer == self.correct_answer

    def correct_answer_text(self) -> str:
        return self.options[self.correct_answer]


@dataclass
class Quiz:
    """A sequence of questions and the responses given to them."""

    questions: list[MultipleChoiceQuestion] = field(default_factory=list)
    responses: list[QuestionResponse] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None

    def add_question(self, question: MultipleChoiceQuestion) -> None:
        self.questions.append(question)

    def conduct(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        """Ask every question in turn, record responses and print a summary."""
        stdout = stdout if stdout is not None else sys.stdout
        if not self.questions:
            stdout.write("No questions to conduct.\n")
            return

        self.start_time = _now()
        total = len(self.questions)
        stdout.write("\n=== Quiz Started ===\n")
        stdout.write(f"Total questions: {total}\n")

        for number, question in enumerate(self.questions, start=1):
            stdout.write(f"\n--- Question {number} of {total} ---\n")
            asked_at = _now()
            selected = question.ask(stdin, stdout)
            answered_at = _now()
            if selected is None:
                continue

            is_correct = question.evaluate(selected)
            self.responses.append(
                QuestionResponse(
                    question_id=question.id,
                    selected_answer=selected,
                    is_correct=is_correct,
                    response_time=int((answered_at - asked_at).total_seconds()),
                    timestamp=answered_at,
                )
            )
            if is_correct:
                stdout.write("✓ Correct!\n")
            else:
                stdout.write(
                    "✗ Incorrect. The correct answer was: "
                    f"{question.correct_answer_text()}\n"
                )
            if question.explanation is not None:
                stdout.write(f"Explanation: {question.explanation}\n")

        self.end_time = _now()
        self._print_results(stdout)

    def _print_results(self, stdout: TextIO) -> None:
        stdout.write("\n=== Quiz Results ===\n")
        correct = sum(1 for response in self.responses if response.is_correct)
        answered = len(self.responses)
        stdout.write(f"Score: {correct}/{answered} ({self.score():.1f}%)\n")

        if self.start_time is not None and self.end_time is not None:
            elapsed = int((self.end_time - self.start_time).total_seconds())
            stdout.write(f"Total time: {elapsed} seconds\n")

        average = (
            sum(response.response_time for response in self.responses) // answered
            if answered
            else 0
        )
        stdout.write(f"Average response time: {average} seconds\n")

        by_id = {question.id: question for question in self.questions}
        stats: dict[QuestionDifficulty, list[int]] = {}
        for response in self.responses:
            question = by_id.get(response.question_id)
            if question is None:
                continue
            entry = stats.setdefault(question.difficulty, [0, 0])
            entry[1] += 1
            if response.is_correct:
                entry[0] += 1

        stdout.write("\nPerformance by difficulty:\n")
        for difficulty, (right, seen) in stats.items():
            percentage = right / seen * 100.0 if seen else 0.0
            stdout.write(f"  {difficulty.value}: {right}/{seen} ({percentage:.1f}%)\n")

    def score(self) -> float:
        """Percentage of recorded responses that were correct."""
        if not self.responses:
            return 0.0
        correct = sum(1 for response in self.responses if response.is_correct)
        return correct / len(self.responses) * 100.0