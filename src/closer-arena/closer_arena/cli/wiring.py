"""Assembles the production object graph from an ArenaConfig."""

from dataclasses import dataclass

from closer_arena.breaker.application.breaker import CircuitBreaker
from closer_arena.breaker.domain.kill_switch import LocalKillSwitch
from closer_arena.breaker.infrastructure.observer import StructlogBreakerObserver
from closer_arena.breaker.infrastructure.registry import create_remote_status
from closer_arena.config.domain.config import ArenaConfig
from closer_arena.content.domain.cache import ProfileCache
from closer_arena.content.infrastructure.instructions import load_scripted_instructions
from closer_arena.content.infrastructure.yaml_profiles import (
    CachingProfileRepository,
    YamlProfileRepository,
)
from closer_arena.generation.infrastructure.litellm import LiteLLMGenerator
from closer_arena.generation.infrastructure.observer import StructlogGenerationObserver
from closer_arena.ledger.application.ledger import CostLedger
from closer_arena.ledger.domain.pricing import PriceTable
from closer_arena.ledger.infrastructure.observer import StructlogLedgerObserver
from closer_arena.notification.infrastructure.observer import (
    StructlogNotificationObserver,
)
from closer_arena.notification.infrastructure.registry import create_notifier
from closer_arena.promotion.application.promotion import PromotionService
from closer_arena.promotion.infrastructure.observer import StructlogPromotionObserver
from closer_arena.ranking.application.ranking import RankingPass
from closer_arena.ranking.infrastructure.litellm import LiteLLMSelector
from closer_arena.ranking.infrastructure.observer import StructlogRankingObserver
from closer_arena.scoring.infrastructure.litellm import LiteLLMScorer
from closer_arena.scoring.infrastructure.observer import StructlogScoringObserver
from closer_arena.session.application.orchestrator import SessionOrchestrator
from closer_arena.session.application.participants import ParticipantFactory
from closer_arena.session.infrastructure.observer import StructlogSessionObserver
from closer_arena.store.infrastructure.registry import create_record_store
from closer_arena.sweep.application.coordinator import BatchSweepCoordinator
from closer_arena.sweep.application.repository import SweepRepository
from closer_arena.sweep.domain.observer import SweepObserver
from closer_arena.sweep.infrastructure.composite_observer import CompositeSweepObserver
from closer_arena.sweep.infrastructure.observer import StructlogSweepObserver
from closer_arena.sweep.infrastructure.progress_observer import ProgressSweepObserver


@dataclass
class Arena:
    ledger: CostLedger
    breaker: CircuitBreaker
    orchestrator: SessionOrchestrator
    coordinator: BatchSweepCoordinator
    ranking: RankingPass
    promotion: PromotionService


def build_arena(config: ArenaConfig, show_progress: bool = False) -> Arena:
    """Wire every component for one CLI invocation.

    Raises:
        ContentLoadError: if the scripted instructions cannot be read.
    """
    store = create_record_store(config=config.store)
    prices = PriceTable(config=config.pricing)
    ledger = CostLedger(
        config=config.budget, store=store, observer=StructlogLedgerObserver()
    )

    breaker_observer = StructlogBreakerObserver()
    breaker = CircuitBreaker(
        kill_switch=LocalKillSwitch(),
        remote=create_remote_status(config=config.breaker, observer=breaker_observer),
        observer=breaker_observer,
    )
    notifier = create_notifier(
        config=config.notification, observer=StructlogNotificationObserver()
    )

    participants = ParticipantFactory(
        scripted_instructions=load_scripted_instructions(
            config.generation.scripted_instructions_path
        ),
        profiles=CachingProfileRepository(
            inner=YamlProfileRepository(path=config.profiles_path),
            cache=ProfileCache(),
        ),
        generator=LiteLLMGenerator(
            config=config.generation, observer=StructlogGenerationObserver()
        ),
        opening_prompt=config.generation.opening_prompt,
    )
    orchestrator = SessionOrchestrator(
        config=config.session,
        participants=participants,
        prices=prices,
        ledger=ledger,
        breaker=breaker,
        scorer=LiteLLMScorer(
            config=config.scoring,
            spend=ledger,
            prices=prices,
            observer=StructlogScoringObserver(),
        ),
        store=store,
        notifier=notifier,
        observer=StructlogSessionObserver(),
        excerpt_chars=config.promotion.excerpt_chars,
    )

    sweep_observers: list[SweepObserver] = [StructlogSweepObserver()]
    if show_progress:
        sweep_observers.append(ProgressSweepObserver())
    sweeps = SweepRepository(store=store)
    coordinator = BatchSweepCoordinator(
        config=config.sweep,
        orchestrator=orchestrator,
        ledger=ledger,
        breaker=breaker,
        sweeps=sweeps,
        notifier=notifier,
        observer=CompositeSweepObserver(observers=sweep_observers),
    )

    ranking = RankingPass(
        config=config.ranking,
        sweeps=sweeps,
        store=store,
        selector=LiteLLMSelector(config=config.ranking, spend=ledger, prices=prices),
        observer=StructlogRankingObserver(),
    )
    promotion = PromotionService(
        config=config.promotion, store=store, observer=StructlogPromotionObserver()
    )
    return Arena(
        ledger=ledger,
        breaker=breaker,
        orchestrator=orchestrator,
        coordinator=coordinator,
        ranking=ranking,
        promotion=promotion,
    )
