"""Tests for SessionOrchestrator — turn loop, cost control and finalization."""

import pytest

from closer_arena.breaker.domain.errors import BreakerTrippedError
from closer_arena.content.domain.errors import ProfileNotFoundError
from closer_arena.core.errors import ArenaError
from closer_arena.generation.domain.role import Role
from closer_arena.generation.infrastructure.errors import GenerationError
from closer_arena.ledger.domain.errors import BudgetExceededError
from closer_arena.scoring.domain.score import SessionScore
from closer_arena.session.application.orchestrator import SESSIONS_COLLECTION
from closer_arena.session.domain.errors import (
    SessionKillThresholdError,
    SessionTurnError,
)
from closer_arena.session.domain.session import Session, SessionStatus
from tests.generation.fake_generator import FakeGenerator
from tests.scoring.fake_scorer import FakeScorer, make_score
from tests.session.fake_auditor import FakeTranscriptAuditor
from tests.session.orchestrator_harness import DOLLAR_MODEL, make_harness


def _failing_generator(call_number: int, error: Exception) -> FakeGenerator:
    return FakeGenerator(
        model=DOLLAR_MODEL,
        input_tokens=100,
        output_tokens=0,
        fail_on_call={call_number: error},
    )


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestTurnLoop:
    """Roles alternate from the scripted side, each seeing only the last opposing turn."""

    async def test_runs_max_turns_and_completes(self) -> None:
        h = make_harness(max_turns=4)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert session.status is SessionStatus.COMPLETED
        assert len(session.turns) == 4

    async def test_roles_alternate_starting_with_scripted(self) -> None:
        h = make_harness(max_turns=5)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert [t.role for t in session.turns] == [
            Role.SCRIPTED,
            Role.COUNTER_AGENT,
            Role.SCRIPTED,
            Role.COUNTER_AGENT,
            Role.SCRIPTED,
        ]

    async def test_first_turn_uses_opening_prompt(self) -> None:
        h = make_harness(max_turns=2)

        await h.orchestrator.run(profile_id="skeptic")

        assert h.generator.calls[0].prompt == "Open the call."
        assert h.generator.calls[0].system_instruction == "You are the closer."

    async def test_each_turn_sees_only_last_opposing_turn(self) -> None:
        h = make_harness(max_turns=3)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert h.generator.calls[1].prompt == session.turns[0].text
        assert h.generator.calls[2].prompt == session.turns[1].text

    async def test_counter_agent_uses_profile_instruction(self) -> None:
        h = make_harness(max_turns=2)

        await h.orchestrator.run(profile_id="skeptic")

        assert h.generator.calls[1].system_instruction == (
            "You are a skeptical property owner."
        )

    async def test_temperature_is_passed_to_both_roles(self) -> None:
        h = make_harness(max_turns=2)

        await h.orchestrator.run(profile_id="skeptic", temperature=0.8)

        assert [c.temperature for c in h.generator.calls] == [0.8, 0.8]

    async def test_given_ids_are_used(self) -> None:
        h = make_harness(max_turns=2)

        session = await h.orchestrator.run(
            profile_id="skeptic", sweep_id="w1", session_id="fixed-id"
        )

        assert session.session_id == "fixed-id"
        assert session.sweep_id == "w1"
        assert h.observer.started[0].sweep_id == "w1"


class TestCompletion:
    """A completed session is scored, persisted once, and carries its spend."""

    async def test_persisted_exactly_once_as_completed(self) -> None:
        h = make_harness(max_turns=2)

        session = await h.orchestrator.run(profile_id="skeptic")

        records = await h.store.query(SESSIONS_COLLECTION)
        assert len(records) == 1
        stored = Session.model_validate(records[0])
        assert stored.status is SessionStatus.COMPLETED
        assert stored.session_id == session.session_id

    async def test_session_cost_matches_ledger_spend(self) -> None:
        h = make_harness(max_turns=4)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert session.cost_usd == pytest.approx(4.0)
        assert await h.ledger.spend_by_attribution([session.session_id]) == (
            pytest.approx(4.0)
        )

    async def test_scorer_receives_full_transcript(self) -> None:
        h = make_harness(max_turns=2)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert h.scorer.calls[0].transcript == session.transcript()
        assert h.scorer.calls[0].throttled is False

    async def test_winning_excerpt_comes_from_score(self) -> None:
        h = make_harness(
            max_turns=2, scorer=FakeScorer(default=make_score(winning_rebuttal="Numbers."))
        )

        session = await h.orchestrator.run(profile_id="skeptic")

        assert session.winning_excerpt == "Numbers."

    async def test_scoring_failure_still_completes(self) -> None:
        h = make_harness(
            max_turns=2, scorer=FakeScorer(default=SessionScore.failed(reason="timeout"))
        )

        session = await h.orchestrator.run(profile_id="skeptic")

        assert session.status is SessionStatus.COMPLETED
        assert session.score is not None
        assert session.score.scoring_failed is True

    async def test_throttled_budget_is_passed_to_scorer(self) -> None:
        h = make_harness(max_turns=2, daily_cap_usd=1000.0)
        await h.ledger.record_spend(amount_usd=950.0, attribution="earlier")

        await h.orchestrator.run(profile_id="skeptic")

        assert h.scorer.calls[0].throttled is True


# ---------------------------------------------------------------------------
# Abort paths
# ---------------------------------------------------------------------------


class TestKillThreshold:
    """Reaching the per-session kill threshold aborts the session at that turn."""

    async def test_aborts_at_crossing_turn(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5)

        with pytest.raises(SessionKillThresholdError) as exc_info:
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert exc_info.value.turn_index == 2
        stored = Session.model_validate(await h.store.get(SESSIONS_COLLECTION, "s1"))
        assert stored.status is SessionStatus.ABORTED_BUDGET
        assert len(stored.turns) == 2
        assert stored.cost_usd == pytest.approx(3.0)

    async def test_spend_equal_to_threshold_kills(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.0)

        with pytest.raises(SessionKillThresholdError) as exc_info:
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert exc_info.value.turn_index == 1
        assert exc_info.value.cost_usd == pytest.approx(2.0)

    async def test_no_further_turns_are_generated(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5)

        with pytest.raises(SessionKillThresholdError):
            await h.orchestrator.run(profile_id="skeptic")

        assert len(h.generator.calls) == 3
        assert h.scorer.calls == []

    async def test_crossing_turn_spend_is_in_ledger(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5)

        with pytest.raises(SessionKillThresholdError):
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert await h.ledger.spend_by_attribution(["s1"]) == pytest.approx(3.0)

    async def test_trips_breaker_and_notifies(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5)

        with pytest.raises(SessionKillThresholdError):
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert await h.breaker.is_tripped() is True
        assert len(h.notifier.messages) == 1
        assert "s1" in h.notifier.messages[0]

    async def test_breaker_left_alone_when_disabled(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5, trip_breaker_on_kill=False)

        with pytest.raises(SessionKillThresholdError):
            await h.orchestrator.run(profile_id="skeptic")

        assert await h.breaker.is_tripped() is False

    async def test_emits_aborted_event(self) -> None:
        h = make_harness(max_turns=10, kill_threshold_usd=2.5)

        with pytest.raises(SessionKillThresholdError):
            await h.orchestrator.run(profile_id="skeptic")

        assert h.observer.aborted[0].status == SessionStatus.ABORTED_BUDGET
        assert h.observer.aborted[0].num_turns == 2
        assert h.observer.completed == []


class TestTurnFailure:
    """A turn that cannot be produced ends the session as aborted_error."""

    async def test_generation_error_aborts_with_error(self) -> None:
        h = make_harness(
            max_turns=6,
            generator=_failing_generator(
                2, GenerationError(role=Role.SCRIPTED, reason="upstream 503")
            ),
        )

        with pytest.raises(SessionTurnError) as exc_info:
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert exc_info.value.turn_index == 2
        stored = Session.model_validate(await h.store.get(SESSIONS_COLLECTION, "s1"))
        assert stored.status is SessionStatus.ABORTED_ERROR
        assert len(stored.turns) == 2
        assert "upstream 503" in (stored.abort_reason or "")

    async def test_unexpected_exception_aborts_with_error(self) -> None:
        h = make_harness(
            max_turns=4,
            generator=_failing_generator(1, RuntimeError("transport reset")),
        )

        with pytest.raises(SessionTurnError) as exc_info:
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        assert exc_info.value.turn_index == 1
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        stored = Session.model_validate(await h.store.get(SESSIONS_COLLECTION, "s1"))
        assert stored.status is SessionStatus.ABORTED_ERROR
        assert len(stored.turns) == 1
        assert "transport reset" in (stored.abort_reason or "")
        assert h.observer.aborted[0].status == SessionStatus.ABORTED_ERROR

    async def test_generation_is_not_retried(self) -> None:
        h = make_harness(
            max_turns=6,
            generator=_failing_generator(
                0, GenerationError(role=Role.SCRIPTED, reason="boom")
            ),
        )

        with pytest.raises(SessionTurnError):
            await h.orchestrator.run(profile_id="skeptic")

        assert len(h.generator.calls) == 1

    async def test_unpriced_model_aborts_with_error(self) -> None:
        h = make_harness(max_turns=2, generator=FakeGenerator(model="unpriced"))

        with pytest.raises(SessionTurnError):
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        stored = await h.store.get(SESSIONS_COLLECTION, "s1")
        assert stored is not None
        assert stored["status"] == SessionStatus.ABORTED_ERROR


class TestAdmission:
    """Work is refused before any turn when budget or breaker says stop."""

    async def test_exceeded_budget_refuses_without_creating_session(self) -> None:
        h = make_harness(daily_cap_usd=10.0)
        await h.ledger.record_spend(amount_usd=10.0, attribution="earlier")

        with pytest.raises(BudgetExceededError):
            await h.orchestrator.run(profile_id="skeptic")

        assert await h.store.query(SESSIONS_COLLECTION) == []
        assert h.generator.calls == []

    async def test_tripped_breaker_aborts_before_first_turn(self) -> None:
        h = make_harness()
        h.breaker.trip(reason="manual")

        with pytest.raises(BreakerTrippedError):
            await h.orchestrator.run(profile_id="skeptic", session_id="s1")

        stored = Session.model_validate(await h.store.get(SESSIONS_COLLECTION, "s1"))
        assert stored.status is SessionStatus.ABORTED_BUDGET
        assert stored.turns == []
        assert h.generator.calls == []

    async def test_remote_kill_switch_aborts_before_first_turn(self) -> None:
        h = make_harness()
        h.remote.value = True

        with pytest.raises(BreakerTrippedError):
            await h.orchestrator.run(profile_id="skeptic")

        assert h.generator.calls == []

    async def test_unknown_profile_raises_without_creating_session(self) -> None:
        h = make_harness()

        with pytest.raises(ProfileNotFoundError):
            await h.orchestrator.run(profile_id="ghost")

        assert await h.store.query(SESSIONS_COLLECTION) == []


class TestAudit:
    """High-scoring sessions are audited; audit failures never fail the session."""

    async def test_high_score_is_audited(self) -> None:
        auditor = FakeTranscriptAuditor()
        h = make_harness(max_turns=2, auditor=auditor)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert auditor.audited == [session.session_id]

    async def test_low_score_is_not_audited(self) -> None:
        auditor = FakeTranscriptAuditor()
        low = make_score(math_defense=2, humanity=2, success=2, margin_integrity=10)
        h = make_harness(max_turns=2, auditor=auditor, scorer=FakeScorer(default=low))

        await h.orchestrator.run(profile_id="skeptic")

        assert auditor.audited == []

    async def test_failed_scoring_is_not_audited(self) -> None:
        auditor = FakeTranscriptAuditor()
        h = make_harness(
            max_turns=2,
            auditor=auditor,
            scorer=FakeScorer(default=SessionScore.failed(reason="x")),
        )

        await h.orchestrator.run(profile_id="skeptic")

        assert auditor.audited == []

    async def test_throttled_budget_skips_audit(self) -> None:
        auditor = FakeTranscriptAuditor()
        h = make_harness(max_turns=2, auditor=auditor, daily_cap_usd=1000.0)
        await h.ledger.record_spend(amount_usd=950.0, attribution="earlier")

        await h.orchestrator.run(profile_id="skeptic")

        assert auditor.audited == []

    async def test_audit_error_is_reported_and_ignored(self) -> None:
        auditor = FakeTranscriptAuditor(error=ArenaError("Failed to audit: boom"))
        h = make_harness(max_turns=2, auditor=auditor)

        session = await h.orchestrator.run(profile_id="skeptic")

        assert session.status is SessionStatus.COMPLETED
        assert h.observer.audit_failures[0].session_id == session.session_id
