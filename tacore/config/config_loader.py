"""
Purpose:
    - Load indicator definitions from a TOML file
    - Build configurations through the registry, applying every parameter by name

File layout:

    [[indicator]]
    name = "rsi"
    [indicator.params]
    period = "14"
    zone = 0.25
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

from tacore.errors.errors import IndicatorError, InvalidConfigurationError
from tacore.indicator.config import IndicatorConfig
from tacore.indicator.params import as_text
from tacore.indicator.registry import build_config

logger = logging.getLogger(__name__)


class IndicatorFileLoader:
    """
    Config-loader; loading toml file.
    """

    def __init__(self, base_dir: str | Path = ".") -> None:
        self._base_dir = Path(base_dir)

    def load(self, file_name: str | Path) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = self._base_dir / path

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with path.open("rb") as f:
            return tomllib.load(f)

    def load_indicators(self, file_name: str | Path) -> list[IndicatorConfig]:
        data = self.load(file_name)
        return self.from_mapping(data)

    def from_mapping(self, data: Mapping[str, Any]) -> list[IndicatorConfig]:
        configs: list[IndicatorConfig] = []
        for i, entry in enumerate(data.get("indicator", [])):
            name = entry.get("name")
            if not name:
                raise InvalidConfigurationError(
                    f"indicator entry #{i} has no name", details={"entry": dict(entry)}
                )
            params = {k: as_text(v) for k, v in entry.get("params", {}).items()}
            try:
                configs.append(build_config(name, params))
            except IndicatorError as e:
                logger.warning(f"[{name}] rejected indicator entry #{i}: {e}")
                raise
        logger.info(f"Loaded {len(configs)} indicator configuration(s)")
        return configs
