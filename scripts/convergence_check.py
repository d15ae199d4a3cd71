#!/usr/bin/env python3
"""Check how stable the MCTS win-rate estimate is across repeated runs.

Runs the same decision several times with independent seeds and reports
the mean, standard deviation and range of the win rate, plus how often
each decision came out.

Usage:
    python scripts/convergence_check.py "A♠ A♥"
    python scripts/convergence_check.py AsKh --board "Qs Js 2d" --runs 10 --budget-ms 1000
"""

from __future__ import annotations

import argparse
import sys

import numpy as np

from holdem_mcts.search import MCTSEngine, SearchConfig
from holdem_mcts.utils.constants import Decision


def run_convergence(
    hole: str,
    board: str = "",
    runs: int = 5,
    budget_ms: float = 2_000,
    base_seed: int | None = None,
) -> np.ndarray:
    """Run ``runs`` independent decisions and return their win rates."""
    seeds = np.random.default_rng(base_seed).integers(0, 2**31, size=runs)
    win_rates = np.zeros(runs)
    decisions: dict[Decision, int] = {d: 0 for d in Decision}

    for i, seed in enumerate(seeds):
        engine = MCTSEngine(SearchConfig(time_budget_ms=budget_ms, seed=int(seed)))
        result = engine.decide(hole, board)
        win_rates[i] = result.win_rate
        decisions[result.decision] += 1
        print(
            f"  run {i + 1:>3}: {result.win_pct:6.2f}% "
            f"({result.visits} sims) → {result.decision.value}"
        )

    print("-" * 50)
    print(f"  mean win rate:  {win_rates.mean():.4f}")
    print(f"  std deviation:  {win_rates.std(ddof=1) if runs > 1 else 0.0:.4f}")
    print(f"  range:          {win_rates.min():.4f} .. {win_rates.max():.4f}")
    for decision, count in decisions.items():
        print(f"  {decision.value:<5}           {count}/{runs}")
    return win_rates


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("hole")
    parser.add_argument("--board", default="")
    parser.add_argument("--runs", type=int, default=5)
    parser.add_argument("--budget-ms", type=float, default=2_000)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args()

    print("=" * 50)
    print(f"  CONVERGENCE CHECK — {args.hole} | {args.board or '(no board)'}")
    print("=" * 50)
    run_convergence(args.hole, args.board, args.runs, args.budget_ms, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
