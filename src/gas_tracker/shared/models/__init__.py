from .enums import AlchemyNetwork, NetworkOutcome, RunStatus, SourceKind, UpsertOutcome
from .gas_price import (
    GAS_ONLY_SCHEMA,
    GAS_WITH_ETH_SCHEMA,
    ColumnSpec,
    CsvSchema,
    KNOWN_SCHEMAS,
    GasPriceRecord,
)

__all__ = [
    "AlchemyNetwork",
    "ColumnSpec",
    "CsvSchema",
    "GAS_ONLY_SCHEMA",
    "GAS_WITH_ETH_SCHEMA",
    "GasPriceRecord",
    "KNOWN_SCHEMAS",
    "NetworkOutcome",
    "RunStatus",
    "SourceKind",
    "UpsertOutcome",
]
