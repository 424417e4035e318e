"""Tests for the Session lifecycle and winning-excerpt selection."""

import pytest

from closer_arena.generation.domain.role import Role
from closer_arena.session.domain.errors import (
    SessionAlreadyFinalizedError,
    SessionStateError,
)
from closer_arena.session.domain.excerpt import select_winning_excerpt
from closer_arena.session.domain.session import Session, SessionStatus
from tests.fake_clock import FakeClock
from tests.scoring.fake_scorer import make_score


def _make_running_session(max_turns: int = 4) -> Session:
    session = Session(session_id="s1", profile_id="skeptic", max_turns=max_turns)
    session.start(now=FakeClock().now)
    return session


class TestLifecycle:
    """A session starts once, grows while running, and finalizes once."""

    def test_new_session_is_not_started(self) -> None:
        session = Session(session_id="s1", profile_id="p", max_turns=2)

        assert session.status is SessionStatus.NOT_STARTED
        assert session.cost_usd == 0.0

    def test_start_twice_raises(self) -> None:
        session = _make_running_session()

        with pytest.raises(SessionStateError):
            session.start(now=FakeClock().now)

    def test_append_before_start_raises(self) -> None:
        session = Session(session_id="s1", profile_id="p", max_turns=2)

        with pytest.raises(SessionStateError):
            session.append_turn(role=Role.SCRIPTED, text="hi")

    def test_append_past_max_turns_raises(self) -> None:
        session = _make_running_session(max_turns=1)
        session.append_turn(role=Role.SCRIPTED, text="hi")

        with pytest.raises(SessionStateError):
            session.append_turn(role=Role.COUNTER_AGENT, text="hello")

    def test_add_cost_accumulates(self) -> None:
        session = _make_running_session()

        session.add_cost(amount_usd=0.5, input_tokens=10, output_tokens=5)
        session.add_cost(amount_usd=0.25, input_tokens=1, output_tokens=1)

        assert session.cost_usd == pytest.approx(0.75)
        assert session.input_tokens == 11
        assert session.output_tokens == 6

    def test_negative_cost_raises(self) -> None:
        session = _make_running_session()

        with pytest.raises(SessionStateError):
            session.add_cost(amount_usd=-1.0)

    def test_finalize_twice_raises(self) -> None:
        session = _make_running_session()
        session.finalize(status=SessionStatus.COMPLETED, now=FakeClock().now)

        with pytest.raises(SessionAlreadyFinalizedError):
            session.finalize(status=SessionStatus.ABORTED_ERROR, now=FakeClock().now)

    def test_finalize_with_non_terminal_status_raises(self) -> None:
        session = _make_running_session()

        with pytest.raises(SessionStateError):
            session.finalize(status=SessionStatus.RUNNING, now=FakeClock().now)

    def test_no_mutation_after_finalize(self) -> None:
        session = _make_running_session()
        session.finalize(status=SessionStatus.ABORTED_BUDGET, now=FakeClock().now)

        with pytest.raises(SessionStateError):
            session.add_cost(amount_usd=1.0)


class TestTranscript:
    def test_transcript_labels_each_turn(self) -> None:
        session = _make_running_session()
        session.append_turn(role=Role.SCRIPTED, text="Hi, I'm Sam.")
        session.append_turn(role=Role.COUNTER_AGENT, text="What do you want?")

        assert session.transcript() == "CLOSER: Hi, I'm Sam.\n\nPERSONA: What do you want?"

    def test_last_turn_of_role(self) -> None:
        session = _make_running_session()
        session.append_turn(role=Role.SCRIPTED, text="one")
        session.append_turn(role=Role.COUNTER_AGENT, text="two")
        session.append_turn(role=Role.SCRIPTED, text="three")

        last = session.last_turn_of(Role.SCRIPTED)

        assert last is not None
        assert last.text == "three"

    def test_record_round_trips_through_model_validate(self) -> None:
        session = _make_running_session()
        session.append_turn(role=Role.SCRIPTED, text="hi", cost_usd=0.1)
        session.finalize(
            status=SessionStatus.COMPLETED, now=FakeClock().now, score=make_score()
        )

        restored = Session.model_validate(session.to_record())

        assert restored.to_record() == session.to_record()
        assert restored.turns[0].role is Role.SCRIPTED


class TestSelectWinningExcerpt:
    """The scorer's rebuttal wins; otherwise the last scripted turns are used."""

    def test_prefers_winning_rebuttal(self) -> None:
        session = _make_running_session()
        session.append_turn(role=Role.SCRIPTED, text="hi")

        excerpt = select_winning_excerpt(
            session=session, score=make_score(winning_rebuttal="The math."), max_chars=50
        )

        assert excerpt == "The math."

    def test_falls_back_to_last_three_scripted_turns(self) -> None:
        session = _make_running_session(max_turns=8)
        for text in ["a", "x", "b", "y", "c", "z", "d"]:
            role = Role.SCRIPTED if text in "abcd" else Role.COUNTER_AGENT
            session.append_turn(role=role, text=text)

        excerpt = select_winning_excerpt(
            session=session, score=make_score(winning_rebuttal=None), max_chars=50
        )

        assert excerpt == "b c d"

    def test_fallback_is_truncated_with_ellipsis(self) -> None:
        session = _make_running_session()
        session.append_turn(role=Role.SCRIPTED, text="x" * 30)

        excerpt = select_winning_excerpt(session=session, score=None, max_chars=10)

        assert excerpt == "x" * 10 + "..."

    def test_no_scripted_turns_is_none(self) -> None:
        session = _make_running_session()

        assert select_winning_excerpt(session=session, score=None, max_chars=10) is None
