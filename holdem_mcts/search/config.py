"""Search configuration and its optional JSON file.

Default path: ~/.holdem_mcts/search_config.json

Expected JSON format (every key optional):
    {
        "time_budget_ms": 10000,
        "exploration": 1.4142135623730951,
        "stay_threshold": 0.5,
        "max_iterations": null,
        "seed": null
    }
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path

import numpy as np

from holdem_mcts.utils.constants import (
    DEFAULT_STAY_THRESHOLD,
    DEFAULT_TIME_BUDGET_MS,
)

logger = logging.getLogger("holdem_mcts.config")

DEFAULT_CONFIG_PATH = Path.home() / ".holdem_mcts" / "search_config.json"


@dataclass(frozen=True)
class SearchConfig:
    """Tunables for one decision.

    Attributes:
        time_budget_ms: Wall-clock budget for the search loop. A budget of
            zero or less completes no rollout.
        exploration: UCB1 exploration constant c in
            ``wins/visits + c * sqrt(ln(parent_visits) / visits)``.
        stay_threshold: Minimum win rate for a Stay decision.
        max_iterations: Optional rollout cap; the loop stops at whichever
            of the cap and the time budget comes first.
        seed: Seed for the rollout random generator (None = fresh entropy).
    """

    time_budget_ms: float = DEFAULT_TIME_BUDGET_MS
    exploration: float = math.sqrt(2)
    stay_threshold: float = DEFAULT_STAY_THRESHOLD
    max_iterations: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("time_budget_ms", "exploration", "stay_threshold"):
            value = getattr(self, name)
            if not _is_number(value):
                raise ValueError(f"{name} must be a number, got {value!r}")
        for name in ("max_iterations", "seed"):
            value = getattr(self, name)
            if value is not None and not _is_integer(value):
                raise ValueError(f"{name} must be an integer or null, got {value!r}")
        if not math.isfinite(self.time_budget_ms):
            raise ValueError(
                f"time_budget_ms must be finite, got {self.time_budget_ms}"
            )
        if not self.exploration >= 0:
            raise ValueError(
                f"exploration must be non-negative, got {self.exploration}"
            )
        if not 0.0 <= self.stay_threshold <= 1.0:
            raise ValueError(
                f"stay_threshold must be in [0, 1], got {self.stay_threshold}"
            )
        if self.max_iterations is not None and self.max_iterations < 0:
            raise ValueError(
                f"max_iterations must be non-negative, got {self.max_iterations}"
            )

    @property
    def time_budget_s(self) -> float:
        return self.time_budget_ms / 1000.0


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(
        value, (bool, np.bool_)
    )


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def load_search_config(config_path: Path | None = None) -> SearchConfig:
    """Load search configuration from a JSON file.

    A missing file yields the defaults, so the engine runs unconfigured.
    An unreadable or malformed file is logged and also yields the defaults.
    Values of the wrong type or out of range raise ValueError.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("No search config at %s, using defaults", path)
        return SearchConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to read search config at %s: %s", path, e)
        return SearchConfig()

    if not isinstance(data, dict):
        logger.warning("Search config at %s is not a JSON object", path)
        return SearchConfig()

    known = {f.name for f in fields(SearchConfig)}
    for key in data:
        if key not in known:
            logger.warning("Ignoring unknown search config key: %s", key)

    return SearchConfig(**{k: v for k, v in data.items() if k in known})
