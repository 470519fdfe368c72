from .state import (
    REDSTONE_RPC_URL,
    ConfigLoader,
    HttpConfig,
    LoggingConfig,
    NetworkSourceConfig,
    ProviderConfig,
    ReferencePriceConfig,
    StorageConfig,
    TrackerConfig,
    get_config,
)

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
