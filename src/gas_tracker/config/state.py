"""
Unified configuration state for the collector.

Single source of truth for run configuration, combining an optional YAML
file with environment overrides, type validation and sensible defaults.
The resulting TrackerConfig is passed explicitly into the collector.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from gas_tracker.ingestion.config.value_objects import (
    AlchemyClientConfig,
    HttpClientConfig,
    ReferencePriceClientConfig,
)
from gas_tracker.ingestion.sources import (
    DirectRpcSource,
    PriceSource,
    ProviderBackedSource,
)
from gas_tracker.shared.models.enums import AlchemyNetwork, SourceKind
from gas_tracker.shared.models.gas_price import (
    GAS_ONLY_SCHEMA,
    GAS_WITH_ETH_SCHEMA,
    CsvSchema,
)

logger = logging.getLogger(__name__)

REDSTONE_RPC_URL = "https://rpc.redstonechain.com"


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class ProviderConfig(BaseModel):
    """Hosted blockchain API provider configuration."""

    api_key: str = Field(default="")
    url_template: str = Field(default="https://{network}.g.alchemy.com/v2/{api_key}")

    model_config = ConfigDict(extra="allow")


class ReferencePriceConfig(BaseModel):
    """Reference price (price index) configuration."""

    enabled: bool = Field(default=True)
    url: str = Field(default="https://api.coingecko.com/api/v3/simple/price")
    asset: str = Field(default="ethereum")
    fiat: str = Field(default="usd")

    model_config = ConfigDict(extra="allow")


class HttpConfig(BaseModel):
    """Outbound HTTP settings."""

    timeout: float = Field(default=30.0, gt=0)

    model_config = ConfigDict(extra="allow")


class StorageConfig(BaseModel):
    """Where the per-network tables live."""

    data_dir: str = Field(default="data")
    file_pattern: str = Field(default="{network}_gasPrices.csv")

    @field_validator("file_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        if "{network}" not in v:
            raise ValueError("file_pattern must contain '{network}'")
        return v

    model_config = ConfigDict(extra="allow")


class NetworkSourceConfig(BaseModel):
    """One tracked network and how its gas price is obtained."""

    network: str
    kind: SourceKind = Field(default=SourceKind.PROVIDER)
    endpoint_url: str | None = Field(default=None)

    @model_validator(mode="after")
    def validate_endpoint(self) -> "NetworkSourceConfig":
        if self.kind == SourceKind.DIRECT_RPC and not self.endpoint_url:
            raise ValueError(f"direct_rpc network {self.network!r} needs endpoint_url")
        return self

    def to_source(self) -> PriceSource:
        if self.kind == SourceKind.DIRECT_RPC:
            return DirectRpcSource(network_id=self.network, endpoint_url=self.endpoint_url)
        return ProviderBackedSource(network_id=self.network)

    model_config = ConfigDict(extra="allow")


def _default_networks() -> list[NetworkSourceConfig]:
    return [
        NetworkSourceConfig(network=AlchemyNetwork.OPT_MAINNET.value),
        NetworkSourceConfig(network=AlchemyNetwork.BASE_MAINNET.value),
        NetworkSourceConfig(network=AlchemyNetwork.ARB_MAINNET.value),
        NetworkSourceConfig(
            network="redstone",
            kind=SourceKind.DIRECT_RPC,
            endpoint_url=REDSTONE_RPC_URL,
        ),
    ]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)

    model_config = ConfigDict(extra="allow")


class TrackerConfig(BaseModel):
    """
    Root configuration state - everything a collector run needs.
    """

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    reference_price: ReferencePriceConfig = Field(default_factory=ReferencePriceConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    networks: list[NetworkSourceConfig] = Field(default_factory=_default_networks)

    # Exit non-zero when the run aborted or any network was not updated
    fail_on_partial: bool = Field(default=False)

    config_dir: str = Field(default="config")

    @field_validator("networks")
    @classmethod
    def validate_unique_networks(
        cls, v: list[NetworkSourceConfig]
    ) -> list[NetworkSourceConfig]:
        names = [n.network for n in v]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"networks tracked more than once: {duplicates}")
        return v

    model_config = ConfigDict(extra="allow")

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def build_sources(self) -> list[PriceSource]:
        return [network.to_source() for network in self.networks]

    @property
    def csv_schema(self) -> CsvSchema:
        return GAS_WITH_ETH_SCHEMA if self.reference_price.enabled else GAS_ONLY_SCHEMA

    def http_client_config(self) -> HttpClientConfig:
        return HttpClientConfig(timeout=self.http.timeout)

    def alchemy_client_config(self) -> AlchemyClientConfig:
        return AlchemyClientConfig(
            api_key=self.provider.api_key, url_template=self.provider.url_template
        )

    def reference_client_config(self) -> ReferencePriceClientConfig:
        return ReferencePriceClientConfig(
            url=self.reference_price.url,
            asset=self.reference_price.asset,
            fiat=self.reference_price.fiat,
        )


# =============================================================================
# CONFIG LOADER - Clean, Validated Loading
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration.

    Merges:
      1. Defaults (hardcoded in the models)
      2. config_dir/tracker.yaml, if present
      3. Environment variable overrides (a local .env is loaded first)
    """

    CONFIG_FILE = "tracker.yaml"

    def __init__(self, config_dir: str = "config", load_env_file: bool = True):
        self.config_dir = Path(config_dir)
        self.load_env_file = load_env_file

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load YAML file, empty dict when absent."""
        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a mapping at top level")
        logger.debug(f"Loaded config: {path}")
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if api_key := os.getenv("ALCHEMY_API_KEY"):
            config.setdefault("provider", {})["api_key"] = api_key

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        if data_dir := os.getenv("GAS_TRACKER_DATA_DIR"):
            config.setdefault("storage", {})["data_dir"] = data_dir

        return config

    def load(self) -> TrackerConfig:
        """
        Load complete configuration state.

        Raises:
            ValidationError: If configuration is invalid
        """
        if self.load_env_file:
            load_dotenv()

        config = self._load_yaml(self.config_dir / self.CONFIG_FILE)
        config = self._apply_env_overrides(config)

        try:
            state = TrackerConfig(config_dir=str(self.config_dir), **config)
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise

        logger.info(
            f"Configuration loaded: networks={len(state.networks)}, "
            f"reference_price={'on' if state.reference_price.enabled else 'off'}, "
            f"data_dir={state.storage.data_dir}"
        )
        return state


def get_config(config_dir: str | None = None) -> TrackerConfig:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to $GAS_TRACKER_CONFIG_DIR or ./config
    """
    if config_dir is None:
        config_dir = os.getenv("GAS_TRACKER_CONFIG_DIR", "config")

    return ConfigLoader(config_dir=config_dir).load()


__all__ = [
    "ConfigLoader",
    "HttpConfig",
    "LoggingConfig",
    "NetworkSourceConfig",
    "ProviderConfig",
    "REDSTONE_RPC_URL",
    "ReferencePriceConfig",
    "StorageConfig",
    "TrackerConfig",
    "get_config",
]
