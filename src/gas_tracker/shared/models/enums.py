"""
Shared enumerations for the gas tracker.
"""

import enum


class AlchemyNetwork(str, enum.Enum):
    """Networks served by the hosted provider, valued by their endpoint slug."""

    ETH_MAINNET = "eth-mainnet"
    OPT_MAINNET = "opt-mainnet"
    BASE_MAINNET = "base-mainnet"
    ARB_MAINNET = "arb-mainnet"
    POLYGON_MAINNET = "polygon-mainnet"


class SourceKind(str, enum.Enum):
    """How a network's gas price is obtained."""

    PROVIDER = "provider"
    DIRECT_RPC = "direct_rpc"


class UpsertOutcome(str, enum.Enum):
    """Which write path the CSV store took for a record."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    APPENDED = "appended"


class NetworkOutcome(str, enum.Enum):
    """Result of one network's collection within a run."""

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    APPENDED = "appended"
    SKIPPED = "skipped"
    FAILED = "failed"

    @classmethod
    def from_upsert(cls, outcome: UpsertOutcome) -> "NetworkOutcome":
        return cls(outcome.value)

    @property
    def wrote_row(self) -> bool:
        return self in (
            NetworkOutcome.CREATED,
            NetworkOutcome.OVERWRITTEN,
            NetworkOutcome.APPENDED,
        )


class RunStatus(str, enum.Enum):
    """Terminal status of a collector run."""

    COMPLETED = "completed"
    ABORTED = "aborted"
