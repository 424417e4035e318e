"""Top-level ArenaConfig aggregate — the root configuration object."""

from pathlib import Path

from pydantic import BaseModel, Field

from closer_arena.config.domain.breaker import BreakerConfig
from closer_arena.config.domain.budget import BudgetConfig
from closer_arena.config.domain.generation import GenerationConfig
from closer_arena.config.domain.notification import NotificationConfig
from closer_arena.config.domain.pricing import PricingConfig
from closer_arena.config.domain.promotion import PromotionConfig
from closer_arena.config.domain.ranking import RankingConfig
from closer_arena.config.domain.scoring import ScoringConfig
from closer_arena.config.domain.session import SessionConfig
from closer_arena.config.domain.store import StoreConfig
from closer_arena.config.domain.sweep import SweepConfig


class ArenaConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a closer-arena deployment."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    profiles_path: Path
    generation: GenerationConfig
    store: StoreConfig = Field(default_factory=StoreConfig)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    budget: BudgetConfig = Field(default_factory=BudgetConfig)
    breaker: BreakerConfig = Field(default_factory=BreakerConfig)
    notification: NotificationConfig = Field(default_factory=NotificationConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    sweep: SweepConfig = Field(default_factory=SweepConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)
    promotion: PromotionConfig = Field(default_factory=PromotionConfig)
