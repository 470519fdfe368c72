"""
Per-network gas price tables stored as CSV files.

Each tracked network owns one file with a fixed header. The store reads the
whole table, rewrites it, or appends a single line; `upsert` combines these
into the daily update policy:

    file absent                  -> write table with the one record
    last row has the same date   -> replace last row, rewrite table
    header differs from layout   -> rewrite table with the record added
    otherwise                    -> append the record as one line

A table written with another layout is upgraded to the configured one when
that loses no column (3-column tables gain an empty ETH price column).
Otherwise it keeps its own layout.
"""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from gas_tracker.infrastructure.observability import get_storage_logger
from gas_tracker.shared.models.enums import UpsertOutcome
from gas_tracker.shared.models.gas_price import (
    GAS_WITH_ETH_SCHEMA,
    KNOWN_SCHEMAS,
    CsvSchema,
    GasPriceRecord,
)
from gas_tracker.storage.path_builder import CsvPathBuilder


class GasPriceCsvStore:
    """CSV-backed record sets, one file per network."""

    def __init__(
        self,
        path_builder: CsvPathBuilder | None = None,
        schema: CsvSchema = GAS_WITH_ETH_SCHEMA,
    ) -> None:
        self.path_builder = path_builder or CsvPathBuilder()
        self.schema = schema
        self.log = get_storage_logger("csv-store")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def path_for(self, network: str) -> Path:
        return self.path_builder.path_for(network)

    def read(self, network: str) -> list[GasPriceRecord] | None:
        """All records of a network's table, or None when no file exists."""
        table = self._load(network)
        return None if table is None else table[0]

    def write_all(
        self,
        network: str,
        records: list[GasPriceRecord],
        schema: CsvSchema | None = None,
    ) -> None:
        """Replace the table with `records`, header first."""
        path = self.path_for(network)
        path.parent.mkdir(parents=True, exist_ok=True)

        self._frame(records, schema).to_csv(path, index=False, lineterminator="\n")
        self.log.info(
            "table_written", network=network, path=str(path), rows=len(records)
        )

    def append_one(
        self,
        network: str,
        record: GasPriceRecord,
        schema: CsvSchema | None = None,
    ) -> None:
        """Append one line to an existing table without reparsing it."""
        path = self.path_for(network)

        if not self._ends_with_newline(path):
            with open(path, "a", encoding="utf-8") as f:
                f.write("\n")

        self._frame([record], schema).to_csv(
            path, mode="a", header=False, index=False, lineterminator="\n"
        )
        self.log.info("row_appended", network=network, path=str(path), date=record.date)

    def upsert(self, network: str, record: GasPriceRecord) -> UpsertOutcome:
        """Insert `record`, or replace the row already stored for its date."""
        table = self._load(network)

        if table is None:
            self.write_all(network, [record])
            return UpsertOutcome.CREATED

        existing, layout, header = table

        if existing and existing[-1].date == record.date:
            existing[-1] = record
            self.write_all(network, existing, layout)
            return UpsertOutcome.OVERWRITTEN

        if header != layout.titles:
            self.write_all(network, existing + [record], layout)
            self.log.info(
                "table_layout_upgraded", network=network, columns=layout.titles
            )
        else:
            self.append_one(network, record, layout)
        return UpsertOutcome.APPENDED

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _load(
        self, network: str
    ) -> tuple[list[GasPriceRecord], CsvSchema, list[str]] | None:
        """Records, the layout to keep writing with, and the header on disk."""
        path = self.path_for(network)
        if not path.exists() or path.stat().st_size == 0:
            return None

        # Strings only: values must come back exactly as they were written.
        df = pd.read_csv(path, dtype=str, keep_default_na=False, index_col=False)
        header = list(df.columns)
        layout = self._layout_for(header)

        if header != self.schema.titles:
            self.log.warning(
                "csv_schema_mismatch",
                network=network,
                path=str(path),
                found=header,
                expected=self.schema.titles,
                layout=layout.titles,
            )

        records = [
            GasPriceRecord.from_row(row, layout)
            for row in df.to_dict(orient="records")
        ]
        return records, layout, header

    def _layout_for(self, header: list[str]) -> CsvSchema:
        if set(header) <= set(self.schema.titles):
            return self.schema
        for schema in KNOWN_SCHEMAS:
            if header == schema.titles:
                return schema
        return self.schema

    @staticmethod
    def _ends_with_newline(path: Path) -> bool:
        if path.stat().st_size == 0:
            return True
        with open(path, "rb") as f:
            f.seek(-1, os.SEEK_END)
            return f.read(1) == b"\n"

    def _frame(
        self, records: list[GasPriceRecord], schema: CsvSchema | None = None
    ) -> pd.DataFrame:
        schema = schema or self.schema
        return pd.DataFrame(
            [record.to_row(schema) for record in records],
            columns=schema.titles,
        )
