"""CLI entrypoint for closer-arena — typer app with session, sweep, rank, budget and promote commands."""

import asyncio
import sys
from collections.abc import Callable
from pathlib import Path

import structlog
import typer

from closer_arena.cli.wiring import Arena, build_arena
from closer_arena.config.domain.config import ArenaConfig
from closer_arena.config.infrastructure.observer import StructlogConfigObserver
from closer_arena.config.infrastructure.yaml_loader import YamlConfigLoader
from closer_arena.content.infrastructure.yaml_profiles import YamlProfileRepository
from closer_arena.core.errors import ArenaError
from closer_arena.ledger.domain.budget import BudgetState
from closer_arena.ranking.domain.ranked import RankingOutcome, RankingStatus
from closer_arena.session.domain.session import Session
from closer_arena.sweep.domain.summary import SweepSummary

app = typer.Typer(add_completion=False)

_CONFIG_ARG = typer.Argument(..., help="Path to arena config YAML")
_LOG_FORMAT_OPT = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path) -> ArenaConfig:
    return YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)


def _execute(log_format: str, action: Callable[[], None]) -> None:
    """Run one command body with the shared logging setup and exit-code policy."""
    try:
        _configure_structlog(log_format=log_format)
        action()
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Interrupted.")
        sys.exit(1)
    except ArenaError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"


def _score_color(score: float) -> str:
    if score >= 70.0:
        return _GREEN
    if score >= 40.0:
        return _YELLOW
    return _RED


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _print_rows(title: str, rows: list[tuple[str, str]]) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  closer-arena  ·  {title}{_RESET}")
    _rule(color=_CYAN)
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")
    typer.echo("")


def _print_session(session: Session) -> None:
    score = session.score
    rows = [
        ("Session", session.session_id),
        ("Profile", session.profile_id),
        ("Status", str(session.status)),
        ("Turns", str(len(session.turns))),
        ("Cost", f"${session.cost_usd:.4f}"),
    ]
    if score is not None:
        color = _score_color(score.composite_score)
        rows += [
            ("Composite", f"{color}{score.composite_score:.1f}{_RESET}"),
            ("Math defense", f"{score.math_defense:.1f}"),
            ("Humanity", f"{score.humanity:.1f}"),
            ("Success", f"{score.success:.1f}"),
            ("Margin integrity", f"{score.margin_integrity:.1f}"),
            ("Validated", "yes" if score.success_validated else "no"),
        ]
        if score.feedback:
            rows.append(("Feedback", score.feedback))
    _print_rows(title="Session Complete", rows=rows)


def _print_sweep(summary: SweepSummary) -> None:
    average = summary.average_score
    status_color = _GREEN if summary.halt_reason is None else _RED
    _print_rows(
        title="Sweep Report",
        rows=[
            ("Sweep", summary.sweep_id),
            ("Status", f"{status_color}{summary.status}{_RESET}"),
            ("Attempted", str(summary.attempted)),
            ("Completed", str(summary.completed)),
            ("Failed", str(summary.failed)),
            ("Total cost", f"${summary.total_cost_usd:.4f}"),
            ("Average score", f"{average:.1f}" if average is not None else "n/a"),
            ("Halt reason", str(summary.halt_reason) if summary.halt_reason else "none"),
        ],
    )


def _print_ranking(outcome: RankingOutcome) -> None:
    if outcome.status is RankingStatus.NO_SUCCESSFUL_PATHS:
        typer.echo(
            f"{_YELLOW}No successful sessions in sweep {outcome.sweep_id}"
            f" ({outcome.candidates_considered} considered).{_RESET}"
        )
        return
    rows = [("Sweep", outcome.sweep_id)]
    for result in outcome.results:
        rows.append(
            (
                f"#{result.rank}",
                f"{result.session_id[:8]}  {result.composite_score:.1f}  {result.rationale}",
            )
        )
    _print_rows(title="Top Sessions" + (" (stored)" if outcome.reused else ""), rows=rows)


def _print_budget(state: BudgetState) -> None:
    if state.is_exceeded:
        status = f"{_RED}exceeded{_RESET}"
    elif state.is_throttled:
        status = f"{_YELLOW}throttled{_RESET}"
    else:
        status = f"{_GREEN}ok{_RESET}"
    _print_rows(
        title="Daily Budget",
        rows=[
            ("Cap", f"${state.daily_cap_usd:.2f}"),
            ("Spent today", f"${state.today_total_usd:.4f}"),
            ("Remaining", f"${state.remaining_usd:.4f}"),
            ("Used", f"{state.percentage_used:.1f}%"),
            ("Status", status),
        ],
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def session(
    config_path: Path = _CONFIG_ARG,
    profile_id: str = typer.Argument(..., help="Counter-agent profile id"),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Run a single session against one counter-agent profile."""

    def action() -> None:
        arena = build_arena(config=_load_config(config_path))
        result = asyncio.run(arena.orchestrator.run(profile_id=profile_id))
        _print_session(session=result)

    _execute(log_format=log_format, action=action)


@app.command()
def sweep(
    config_path: Path = _CONFIG_ARG,
    profile: list[str] | None = typer.Option(
        None,
        "--profile",
        "-p",
        help="Counter-agent profile id (repeatable). Defaults to every profile.",
    ),
    total: int | None = typer.Option(None, "--total", min=1, help="Sessions to run"),
    batch_size: int | None = typer.Option(
        None, "--batch-size", min=1, help="Sessions per concurrent group"
    ),
    rank: bool = typer.Option(True, "--rank/--no-rank", help="Rank a completed sweep"),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Run a batch sweep, then rank its winning sessions."""

    def action() -> None:
        config = _load_config(config_path)
        profile_ids = profile or YamlProfileRepository(path=config.profiles_path).list_ids()
        arena = build_arena(config=config, show_progress=log_format != "json")
        summary, outcome = asyncio.run(
            _sweep_and_rank(
                arena=arena,
                profile_ids=profile_ids,
                total=total,
                batch_size=batch_size,
                rank=rank,
            )
        )
        _print_sweep(summary=summary)
        if outcome is not None:
            _print_ranking(outcome=outcome)
        if summary.halt_reason is not None:
            raise typer.Exit(code=1)

    _execute(log_format=log_format, action=action)


async def _sweep_and_rank(
    arena: Arena,
    profile_ids: list[str],
    total: int | None,
    batch_size: int | None,
    rank: bool,
) -> tuple[SweepSummary, RankingOutcome | None]:
    new_sweep = await arena.coordinator.create_sweep(
        profile_ids=profile_ids, target_total=total, batch_size=batch_size
    )
    summary = await arena.coordinator.run(new_sweep)
    if not rank or summary.halt_reason is not None:
        return summary, None
    return summary, await arena.ranking.run(sweep_id=summary.sweep_id)


@app.command(name="rank")
def rank_command(
    config_path: Path = _CONFIG_ARG,
    sweep_id: str = typer.Argument(..., help="Id of a completed sweep"),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Rank the successful sessions of a completed sweep."""

    def action() -> None:
        arena = build_arena(config=_load_config(config_path))
        _print_ranking(outcome=asyncio.run(arena.ranking.run(sweep_id=sweep_id)))

    _execute(log_format=log_format, action=action)


@app.command()
def budget(
    config_path: Path = _CONFIG_ARG,
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Show today's spend against the daily cap."""

    def action() -> None:
        arena = build_arena(config=_load_config(config_path))
        _print_budget(state=asyncio.run(arena.ledger.get_budget_state()))

    _execute(log_format=log_format, action=action)


@app.command()
def promote(
    config_path: Path = _CONFIG_ARG,
    output: Path = typer.Option(
        ..., "--output", "-o", help="Where to write the promoted instructions"
    ),
    sweep_id: str | None = typer.Option(
        None, "--sweep-id", help="Also promote this sweep's ranked sessions"
    ),
    base: Path | None = typer.Option(
        None, "--base", help="Base instructions file. Defaults to the configured one."
    ),
    log_format: str = _LOG_FORMAT_OPT,
) -> None:
    """Promote golden samples and ranked sessions into the scripted instructions."""

    def action() -> None:
        config = _load_config(config_path)
        arena = build_arena(config=config)
        promoted = asyncio.run(
            _promote(
                arena=arena,
                sweep_id=sweep_id,
                base_path=base or config.generation.scripted_instructions_path,
                output=output,
            )
        )
        typer.echo(f"Promoted {promoted} new tactic(s); wrote {output}")

    _execute(log_format=log_format, action=action)


async def _promote(
    arena: Arena, sweep_id: str | None, base_path: Path, output: Path
) -> int:
    promoted = await arena.promotion.harvest_golden_samples()
    if sweep_id is not None:
        promoted += await arena.promotion.promote_ranked(sweep_id=sweep_id)
    await arena.promotion.write_promoted_instructions(
        base_path=base_path, output_path=output
    )
    return len(promoted)


if __name__ == "__main__":
    app()
