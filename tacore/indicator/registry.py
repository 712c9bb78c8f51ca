"""
Name -> configuration class registry.

Lets external layers (config files, command lines, tuning loops) build an
indicator from its name and textual key/value pairs.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, TypeVar

from tacore.errors.errors import UnknownParameterError
from tacore.indicator.config import IndicatorConfig
from tacore.types.aliases import ParamText

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type[IndicatorConfig])

_REGISTRY: dict[str, type[IndicatorConfig]] = {}


def register(cls: C) -> C:
    name = cls.NAME
    existing = _REGISTRY.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Indicator name '{name}' already registered by {existing.__name__}")
    _REGISTRY[name] = cls
    return cls


def _ensure_loaded() -> None:
    # The reference indicators register themselves on import
    import tacore.indicators  # noqa: F401


def available() -> tuple[str, ...]:
    _ensure_loaded()
    return tuple(sorted(_REGISTRY))


def get(name: str) -> type[IndicatorConfig]:
    _ensure_loaded()
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownParameterError(
            f"Unknown indicator '{name}'",
            parameter="name",
            details={"known": sorted(_REGISTRY)},
        ) from None


def build_config(name: str, params: Optional[Mapping[str, ParamText]] = None) -> IndicatorConfig:
    """Default configuration of indicator `name` with `params` applied via set()."""
    config = get(name)()
    if params:
        config.configure(params)
    logger.debug(f"[{name}] built config {dict(config.params())}")
    return config
