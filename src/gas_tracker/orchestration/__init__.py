"""
Orchestration: per-network collection and the run driver.
"""

from .collector import GasPriceCollector, NetworkResult, RunSummary

__all__ = ["GasPriceCollector", "NetworkResult", "RunSummary"]
