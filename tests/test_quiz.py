import json

import pytest

from core.models import QuizAnswers
from core.quiz import QUIZ_STEPS, QuizSession


@pytest.fixture
def state_path(tmp_path):
    return str(tmp_path / "quiz.json")


def answer_all(session):
    for value in (10, "Mountains", "Mid-range", "Moderate", "solo"):
        session.select(value)


def test_steps_follow_quiz_order():
    assert [s.field for s in QUIZ_STEPS] == ["days", "priority", "budget", "fitness", "style"]
    assert [o.value for o in QUIZ_STEPS[0].options] == [5, 10, 20]


def test_completed_quiz_gives_answers(state_path):
    session = QuizSession(state_path)
    answer_all(session)
    assert session.is_complete
    assert session.current_step == len(QUIZ_STEPS) - 1
    assert session.answers() == QuizAnswers(10, "Mountains", "Mid-range", "Moderate", "solo")


def test_incomplete_quiz_refuses_answers(state_path):
    session = QuizSession(state_path)
    session.select(5)
    with pytest.raises(ValueError, match="priority"):
        session.answers()


def test_invalid_option_rejected(state_path):
    session = QuizSession(state_path)
    with pytest.raises(ValueError):
        session.select(7)
    assert session.current_step == 0


def test_interrupted_session_resumes_at_same_step(state_path):
    session = QuizSession(state_path)
    session.select(20)
    session.select("Wildlife")

    resumed = QuizSession(state_path)
    assert resumed.current_step == 2
    assert resumed.answers_so_far == {"days": 20, "priority": "Wildlife"}


def test_back_keeps_answers(state_path):
    session = QuizSession(state_path)
    session.select(5)
    session.back()
    assert session.current_step == 0
    assert session.answers_so_far == {"days": 5}
    session.back()
    assert session.current_step == 0


def test_reset_clears_state_file(state_path, tmp_path):
    session = QuizSession(state_path)
    session.select(5)
    assert (tmp_path / "quiz.json").exists()
    session.reset()
    assert not (tmp_path / "quiz.json").exists()
    assert QuizSession(state_path).answers_so_far == {}


def test_corrupt_state_starts_fresh(state_path, tmp_path):
    (tmp_path / "quiz.json").write_text("{not json")
    session = QuizSession(state_path)
    assert session.current_step == 0
    assert session.answers_so_far == {}


def test_saved_state_format(state_path, tmp_path):
    session = QuizSession(state_path)
    session.select(10)
    saved = json.loads((tmp_path / "quiz.json").read_text())
    assert saved == {"current_step": 1, "answers": {"days": 10}}


def test_in_memory_session_without_path():
    session = QuizSession()
    answer_all(session)
    assert session.is_complete
