"""Builds per-network CSV paths so the collector and tests do not drift."""

from __future__ import annotations

from pathlib import Path


class CsvPathBuilder:
    """Resolves data/<network>_gasPrices.csv style paths."""

    DEFAULT_PATTERN = "{network}_gasPrices.csv"

    def __init__(self, data_dir: str | Path = "data", pattern: str = DEFAULT_PATTERN):
        self.data_dir = Path(data_dir)
        self.pattern = pattern

    def path_for(self, network: str) -> Path:
        return self.data_dir / self.pattern.format(network=network)
