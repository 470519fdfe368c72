"""
Daily gas price collector for EVM networks.

Modules:
- ingestion: Gas price and reference price acquisition
- storage: Per-network CSV tables
- orchestration: Per-network collection and the run driver
- shared: Common models and enums
- infrastructure: Logging
- config: Validated configuration state
"""

__version__ = "0.1.0"
