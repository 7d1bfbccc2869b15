"""Triage control loop.

Each cycle lists the reviewer's assigned pull requests, runs every one not yet
seen through detail fetch → review → risk extraction → optional approval, and
records it. The set of seen identifiers is an explicit DedupeTracker value
passed into run_cycle and returned from it, so a cycle is a state transition
with its I/O confined to the source, generator and executor it is given.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from prtriage_core.dedupe import DedupeTracker
from prtriage_core.models import PullRequestSummary
from prtriage_core.risk import extract_risk_level, should_approve

console = Console()
logger = logging.getLogger(__name__)

_SEPARATOR = "[magenta]=====================================[/magenta]"


@dataclass(frozen=True)
class ItemOutcome:
    """What happened to one pull request that made it past the detail fetch."""

    summary: PullRequestSummary
    risk_level: str
    approved: bool


@dataclass(frozen=True)
class CycleResult:
    known: DedupeTracker
    outcomes: list[ItemOutcome] = field(default_factory=list)


def process_item(summary: PullRequestSummary, source, generator, executor) -> ItemOutcome | None:
    """Triage a single pull request.

    Returns None when the detail could not be fetched; the caller must leave
    the item unrecorded so it is retried next cycle. Any other outcome,
    including a failed review or a failed approval, is final.
    """
    console.print(f"New PR assigned: #{summary.number} - {escape(summary.title)}")

    detail = source.fetch_detail(summary.owner, summary.repo, summary.number)
    if detail is None:
        logger.warning("Skipping PR #%d for this cycle: could not fetch its details.", summary.number)
        return None

    narrative = generator.generate(detail.title, detail.description, detail.diff)
    console.print(_SEPARATOR)
    console.print("[magenta]Code Review:[/magenta]")
    console.print(narrative, markup=False)

    risk_level = extract_risk_level(narrative)
    console.print(f"[bright_yellow]Pull Request URL: {summary.identifier}[/bright_yellow]")
    console.print(f"[bright_yellow]Risk Level: {escape(risk_level)}[/bright_yellow]")

    approved = False
    if should_approve(risk_level):
        approved = executor.approve_and_comment(summary.owner, summary.repo, summary.number)
    console.print(_SEPARATOR)

    return ItemOutcome(summary=summary, risk_level=risk_level, approved=approved)


def run_cycle(known: DedupeTracker, source, generator, executor) -> CycleResult:
    """Run one polling cycle and return the updated tracker.

    Errors from listing the assigned pull requests are not caught here.
    Items are processed strictly in listing order.
    """
    summaries = source.list_assigned()

    outcomes: list[ItemOutcome] = []
    for summary in summaries:
        if summary.identifier in known:
            continue
        outcome = process_item(summary, source, generator, executor)
        if outcome is None:
            continue
        known = known.record(summary.identifier)
        outcomes.append(outcome)

    return CycleResult(known=known, outcomes=outcomes)


def run_forever(
    source,
    generator,
    executor,
    interval: float,
    sleep: Callable[[float], None] = time.sleep,
    max_cycles: int | None = None,
) -> DedupeTracker:
    """Poll, triage and sleep until the process is stopped.

    max_cycles bounds the loop; None (the default) means forever. The tracker
    is returned only when the loop is bounded.
    """
    known = DedupeTracker()
    cycles = 0
    while max_cycles is None or cycles < max_cycles:
        logger.info("Checking for new pull requests assigned to %s...", source.username)
        result = run_cycle(known, source, generator, executor)
        known = result.known
        cycles += 1
        sleep(interval)
    return known
