import io

import pytest

from warpish.mcq import MultipleChoiceQuestion, QuestionDifficulty, Quiz


def _capital():
    return MultipleChoiceQuestion(
        "q1",
        "What is the capital of France?",
        ["Berlin", "Paris", "Madrid"],
        1,
        QuestionDifficulty.EASY,
        "Geography",
    )


def _arith():
    return MultipleChoiceQuestion(
        "q2",
        "What is 2 + 2?",
        ["3", "4", "5"],
        1,
        QuestionDifficulty.EASY,
        "Math",
    )


def test_question_evaluation():
    question = _capital()
    assert question.evaluate(1)
    assert not question.evaluate(0)
    assert question.correct_answer_text() == "Paris"


def test_quiz_creation():
    quiz = Quiz()
    quiz.add_question(_arith())
    assert len(quiz.questions) == 1


def test_question_with_explanation():
    question = MultipleChoiceQuestion(
        "q1",
        "What is the largest planet?",
        ["Earth", "Jupiter", "Saturn"],
        1,
        QuestionDifficulty.MEDIUM,
        "Science",
    ).with_explanation("Jupiter is the largest planet in our solar system.")
    assert question.explanation == "Jupiter is the largest planet in our solar system."


def test_with_time_limit_leaves_original():
    original = _capital()
    limited = original.with_time_limit(30)
    assert limited.time_limit == 30
    assert original.time_limit is None


def test_ask_retries_until_valid():
    out = io.StringIO()
    answer = _capital().ask(io.StringIO("x\n0\n9\n 2 \n"), out)
    assert answer == 1
    text = out.getvalue()
    assert text.count("Invalid selection, try again.") == 3
    assert "Category: Geography | Difficulty: Easy" in text
    assert "2. Paris" in text
    assert "Select your answer (1-3): " in text


def test_ask_shows_time_limit():
    out = io.StringIO()
    _capital().with_time_limit(15).ask(io.StringIO("1\n"), out)
    assert "Time limit: 15 seconds" in out.getvalue()


def test_ask_returns_none_at_end_of_input():
    assert _capital().ask(io.StringIO("bad\n"), io.StringIO()) is None


def test_empty_quiz_reports_and_returns():
    out = io.StringIO()
    quiz = Quiz()
    quiz.conduct(io.StringIO(""), out)
    assert out.getvalue() == "No questions to conduct.\n"
    assert quiz.start_time is None


def test_conduct_records_responses_and_score():
    quiz = Quiz()
    quiz.add_question(_capital().with_explanation("Paris is the capital."))
    quiz.add_question(_arith())
    out = io.StringIO()
    quiz.conduct(io.StringIO("2\n1\n"), out)

    assert [r.is_correct for r in quiz.responses] == [True, False]
    assert [r.selected_answer for r in quiz.responses] == [1, 0]
    assert quiz.score() == pytest.approx(50.0)
    assert quiz.start_time <= quiz.end_time

    text = out.getvalue()
    assert "Total questions: 2" in text
    assert "✓ Correct!" in text
    assert "✗ Incorrect. The correct answer was: 4" in text
    assert "Explanation: Paris is the capital." in text
    assert "Score: 1/2 (50.0%)" in text
    assert "  Easy: 1/2 (50.0%)" in text


def test_score_without_responses():
    assert Quiz().score() == 0.0