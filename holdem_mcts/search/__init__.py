"""Time-bounded MCTS Stay/Fold engine for heads-up Texas Hold'em.

Estimates the win probability of two hole cards against one random
opponent with UCB1-guided Monte Carlo Tree Search over random rollouts,
then thresholds it into a decision.

Key public API:
    decide          -- One-shot decision with default or given config
    MCTSEngine      -- Reusable engine (implements DecisionEngine)
    DecisionEngine  -- Interface for swappable decision backends
    DecisionResult  -- Decision plus visits, wins, losses and win rate
    SearchConfig    -- Time budget and search tunables
"""

from holdem_mcts.search.config import SearchConfig, load_search_config
from holdem_mcts.search.data_structures import DecisionEngine, DecisionResult
from holdem_mcts.search.engine import MCTSEngine, decide

__all__ = [
    "DecisionEngine",
    "DecisionResult",
    "MCTSEngine",
    "SearchConfig",
    "decide",
    "load_search_config",
]
