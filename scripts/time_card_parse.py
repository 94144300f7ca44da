#!/usr/bin/env python3
"""Time `parse_card` over a file of cards.

Input file: one card per line, trigger text and effect text separated by a tab.
Blank lines and lines starting with `#` are ignored.
"""

from __future__ import annotations

import argparse
import cProfile
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from saplex.logging_config import setup_logging
from saplex.parser import ParseMode
from saplex.pipeline import CardText, parse_card


def _read_cards(path: Path) -> list[CardText]:
    cards: list[CardText] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        if not raw.strip() or raw.startswith("#"):
            continue
        trigger, _, effect = raw.partition("\t")
        cards.append((trigger.strip(), effect.strip()))
    return cards


def _time_runs(
    cards: list[CardText],
    mode: ParseMode,
    runs: int,
    progress: bool,
) -> tuple[list[float], int]:
    """Parse every card `runs` times after one untimed pass; return timings and effect count."""
    timings: list[float] = []
    effects = 0
    for run in range(runs + 1):
        start = time.perf_counter()
        effects = sum(
            len(parse_card(trigger, effect, mode=mode).effects)
            for trigger, effect in tqdm(cards, desc=f"pass {run}", unit="card", disable=not progress)
        )
        if run:
            timings.append(time.perf_counter() - start)
    return timings, effects


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark card parsing throughput")
    parser.add_argument("cards", type=Path, help="Tab-separated file of trigger/effect lines")
    parser.add_argument("--mode", type=ParseMode, choices=list(ParseMode), default=ParseMode.STRICT)
    parser.add_argument("--runs", type=int, default=5, help="Timed passes (default: 5)")
    parser.add_argument("--progress", action="store_true", help="Show tqdm bars")
    parser.add_argument("--profile", action="store_true", help="Print the cumulative cProfile top 25")
    args = parser.parse_args()
    setup_logging()

    cards = _read_cards(args.cards)
    if not cards:
        raise SystemExit(f"No cards found in {args.cards}")

    profiler = cProfile.Profile()
    if args.profile:
        profiler.enable()
    timings, effects = _time_runs(cards, args.mode, max(args.runs, 1), args.progress)
    if args.profile:
        profiler.disable()
        pstats.Stats(profiler).sort_stats(pstats.SortKey.CUMULATIVE).print_stats(25)

    mean = statistics.mean(timings)
    print(f"{args.cards} (mode={args.mode}): {len(cards)} cards, {effects} effects")
    print(f"best {min(timings):.4f}s  median {statistics.median(timings):.4f}s  worst {max(timings):.4f}s")
    print(f"{len(cards) / mean:.1f} cards/s over {len(timings)} runs")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
