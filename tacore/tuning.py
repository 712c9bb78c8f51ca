"""
Parameter grids for tuning loops.

Combinations are produced as textual key/value pairs and applied through the
name-based setter, so any registered indicator can be searched without
per-indicator code. Invalid combinations are still yielded; they are rejected
by init() when evaluated.
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from tacore.indicator.config import IndicatorConfig
from tacore.indicator.params import as_text
from tacore.indicator.registry import build_config

ParamSet: TypeAlias = dict[str, str]


@dataclass(frozen=True, slots=True)
class ParamGrid:
    """
    Parameter grid over one indicator.

    Example:
        >>> grid = ParamGrid("rsi", {"period": [7, 14, 21], "zone": [0.2, 0.3]})
        >>> grid.grid_size
        6
        >>> configs = list(grid.configs())
    """

    indicator: str
    param_ranges: dict[str, Sequence[Any]]

    def __post_init__(self) -> None:
        if not self.param_ranges:
            raise ValueError("param_ranges cannot be empty")
        for name, values in self.param_ranges.items():
            if not values:
                raise ValueError(f"Parameter '{name}' has empty range")

    @property
    def grid_size(self) -> int:
        """Total number of combinations in full grid."""
        size = 1
        for values in self.param_ranges.values():
            size *= len(values)
        return size

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(self.param_ranges.keys())

    def generate(self, *, n_random: int | None = None, seed: int | None = None) -> Iterator[ParamSet]:
        """
        Generate parameter combinations as text.

        Args:
            n_random: If provided, sample this many random combinations without
                      replacement. If None, generate the full grid.
            seed: Random seed for reproducibility (only used with n_random).
        """
        names = self.param_names
        all_values = [[as_text(v) for v in self.param_ranges[name]] for name in names]

        if n_random is None or n_random >= self.grid_size:
            for combo in itertools.product(*all_values):
                yield dict(zip(names, combo, strict=True))
            return

        rng = random.Random(seed)
        all_combos = list(itertools.product(*all_values))
        for idx in rng.sample(range(len(all_combos)), n_random):
            yield dict(zip(names, all_combos[idx], strict=True))

    def configs(
        self, *, n_random: int | None = None, seed: int | None = None
    ) -> Iterable[IndicatorConfig]:
        """Configured indicator for every generated combination."""
        for params in self.generate(n_random=n_random, seed=seed):
            yield build_config(self.indicator, params)
