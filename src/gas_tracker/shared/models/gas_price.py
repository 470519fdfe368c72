"""
Gas price record and the CSV column schemas it is persisted with.
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from gas_tracker.common.utils.date_utils import is_iso_date


@dataclass(frozen=True)
class ColumnSpec:
    """Maps a record attribute to its display header."""

    id: str
    title: str


@dataclass(frozen=True)
class CsvSchema:
    """Ordered column layout of a gas price table."""

    columns: tuple[ColumnSpec, ...]

    @property
    def ids(self) -> list[str]:
        return [column.id for column in self.columns]

    @property
    def titles(self) -> list[str]:
        return [column.title for column in self.columns]

    def title_for(self, column_id: str) -> str:
        for column in self.columns:
            if column.id == column_id:
                return column.title
        raise KeyError(column_id)

    def id_for(self, title: str) -> str:
        for column in self.columns:
            if column.title == title:
                return column.id
        raise KeyError(title)


GAS_ONLY_SCHEMA = CsvSchema(
    columns=(
        ColumnSpec("date", "Date"),
        ColumnSpec("network", "Network"),
        ColumnSpec("gas_price", "Gas Price (Gwei)"),
    )
)

GAS_WITH_ETH_SCHEMA = CsvSchema(
    columns=GAS_ONLY_SCHEMA.columns + (ColumnSpec("eth_price", "ETH Price (USD)"),)
)

# Layouts a table on disk may have been written with
KNOWN_SCHEMAS = (GAS_WITH_ETH_SCHEMA, GAS_ONLY_SCHEMA)


class GasPriceRecord(BaseModel):
    """One network's gas price for one calendar day."""

    model_config = ConfigDict(frozen=True)

    date: str  # YYYY-MM-DD
    network: str
    gas_price: str  # gwei
    eth_price: str | None = None  # USD

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        if not is_iso_date(v):
            raise ValueError(f"date must be YYYY-MM-DD, got {v!r}")
        return v

    @field_validator("network", "gas_price")
    @classmethod
    def validate_present(cls, v: str) -> str:
        if not v:
            raise ValueError("value must not be empty")
        return v

    def to_row(self, schema: CsvSchema) -> dict[str, str]:
        """Serialize to a header-keyed row; a missing eth_price becomes ''."""
        values = self.model_dump()
        return {
            column.title: "" if values.get(column.id) is None else values[column.id]
            for column in schema.columns
        }

    @classmethod
    def from_row(cls, row: dict[str, str], schema: CsvSchema) -> "GasPriceRecord":
        """Parse a header-keyed row; headers not in the schema are ignored."""
        values: dict[str, str | None] = {}
        for title, value in row.items():
            try:
                column_id = schema.id_for(title)
            except KeyError:
                continue
            values[column_id] = value if value != "" else None
        return cls(**values)
