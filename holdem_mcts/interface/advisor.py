"""Command line Stay/Fold advisor.

Usage:
    holdem-mcts "A♠ K♥"
    holdem-mcts AsKh --board "Qs Js 2d" --budget-ms 3000 --seed 7

Example output:
    ══════════════════════════════════════════
      Selection Policy
    ══════════════════════════════════════════
      Hand:               A♠ K♥
      Board:              (none)
      Total Simulations:  41234
      Wins:               27310
      Losses:             13924
      Win Probability:    66.23%
    ══════════════════════════════════════════
      Decision Rule: Stay
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from holdem_mcts.search import DecisionResult, MCTSEngine, load_search_config
from holdem_mcts.utils.card import Card, parse_cards
from holdem_mcts.utils.errors import PokerMCTSError

_RULE = "═" * 42


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holdem-mcts",
        description="Decide Stay or Fold for two hole cards by MCTS rollouts.",
    )
    parser.add_argument("hole", help="two hole cards, e.g. 'A♠ K♥' or AsKh")
    parser.add_argument(
        "--board", default="", help="revealed community cards (0-5)",
    )
    parser.add_argument(
        "--budget-ms", type=float, default=None,
        help="search time budget in milliseconds (default 10000)",
    )
    parser.add_argument(
        "--max-iterations", type=int, default=None,
        help="stop after this many rollouts even if time remains",
    )
    parser.add_argument("--seed", type=int, default=None, help="rollout RNG seed")
    parser.add_argument(
        "--config", type=Path, default=None,
        help="search config JSON (default ~/.holdem_mcts/search_config.json)",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the result as JSON",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log every rollout (slow)",
    )
    return parser


def _report(hole: list[Card], board: list[Card], result: DecisionResult) -> None:
    """Print the decision summary."""
    print(_RULE)
    print("  Selection Policy")
    print(_RULE)
    print(f"  Hand:               {' '.join(str(c) for c in hole)}")
    print(f"  Board:              {' '.join(str(c) for c in board) or '(none)'}")
    print(f"  Total Simulations:  {result.visits}")
    print(f"  Wins:               {result.wins}")
    print(f"  Losses:             {result.losses}")
    print(f"  Win Probability:    {result.win_pct:.2f}%")
    print(_RULE)
    print(f"  Decision Rule: {result.decision.value}")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = load_search_config(args.config)
        overrides: dict[str, object] = {}
        if args.budget_ms is not None:
            overrides["time_budget_ms"] = args.budget_ms
        if args.max_iterations is not None:
            overrides["max_iterations"] = args.max_iterations
        if args.seed is not None:
            overrides["seed"] = args.seed
        config = replace(config, **overrides)

        hole = parse_cards(args.hole)
        board = parse_cards(args.board)
        result = MCTSEngine(config).decide(hole, board)
    except (PokerMCTSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        _report(hole, board, result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
