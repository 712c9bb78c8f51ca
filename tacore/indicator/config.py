"""
Configuration contract shared by every indicator.

A configuration is a mutable dataclass of parameters. It validates itself,
declares its result shape, accepts parameter updates by name from text, and
turns itself into a running instance given a seed bar. `eval` is defined here
once, on top of `init` and `step`, and is never overridden by indicators.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Sequence

from tacore.errors.errors import InvalidConfigurationError, UnknownParameterError
from tacore.indicator.instance import IndicatorInstance
from tacore.indicator.params import as_text, param_types, parse_param
from tacore.types.aliases import ParamText, Shape
from tacore.types.bar import OHLCV
from tacore.types.result import IndicatorResult

logger = logging.getLogger(__name__)


class IndicatorConfig(ABC):
    """
    Key principles:
        - validate() reports, never raises, for any state reachable through set()
        - set() is atomic per call: on failure nothing changes
        - size() depends on parameters only, never on data
        - init() validates before allocating any state; the instance receives a
          private snapshot of the parameters, so later set() calls on this object
          never reach an instance that already exists
    """

    NAME: ClassVar[str] = "indicator"

    # --- Property methods ---

    @property
    def name(self) -> str:
        return self.NAME

    @classmethod
    def param_names(cls) -> tuple[str, ...]:
        return tuple(param_types(cls))

    def params(self) -> Mapping[str, Any]:
        """Read-only view of the current parameter values."""
        return MappingProxyType({n: getattr(self, n) for n in self.param_names()})

    # --- Contract ---

    @abstractmethod
    def validate(self) -> bool:
        """
        True if the parameters are internally consistent.
        Must be total: returns False instead of raising on odd field values.
        """

    @abstractmethod
    def size(self) -> Shape:
        """(raw_count, signal_count) of every result this configuration produces."""

    @abstractmethod
    def _instantiate(self, seed: OHLCV) -> IndicatorInstance:
        """
        Build the running instance from a validated parameter snapshot.
        Accumulators are seeded from `seed`; no result is emitted for it here.
        """

    # --- Dynamic parameters ---

    def set(self, name: str, value: ParamText) -> None:
        """
        Update parameter `name` from its textual representation.

        Raises:
            UnknownParameterError: `name` is not a parameter of this indicator.
            ParseFailureError: `value` does not convert to the parameter type.
        """
        types = param_types(type(self))
        if name not in types:
            raise UnknownParameterError(
                f"Unknown parameter '{name}'",
                parameter=name,
                indicator=self.NAME,
                details={"known": list(types)},
            )
        text = as_text(value)
        # Parse fully before touching the field
        parsed = parse_param(self.NAME, name, text, types[name])
        setattr(self, name, parsed)
        logger.debug(f"[{self.NAME}] set {name}={parsed!r}")

    def configure(self, values: Mapping[str, ParamText]) -> IndicatorConfig:
        """Apply set() for each pair in order; the first failure propagates."""
        for name, value in values.items():
            self.set(name, value)
        return self

    # --- Lifecycle ---

    def init(self, seed: OHLCV) -> IndicatorInstance:
        if not self.validate():
            raise InvalidConfigurationError(
                "Configuration failed validation",
                params=dict(self.params()),
                indicator=self.NAME,
            )
        snapshot = copy.deepcopy(self)
        instance = snapshot._instantiate(seed)
        logger.debug(f"[{self.NAME}] initialized with {dict(snapshot.params())}")
        return instance

    def eval(self, bars: Sequence[OHLCV]) -> list[IndicatorResult]:
        """
        Evaluate over a sequence of bars: one result per bar, in order.

        The first bar seeds the instance and is then stepped like every other
        bar, so a single-bar sequence yields exactly one result.
        """
        if len(bars) == 0:
            return []

        state = self.init(bars[0])
        results = [state.step(bar) for bar in bars]
        logger.debug(f"[{self.NAME}] evaluated {len(results)} bars")
        return results
