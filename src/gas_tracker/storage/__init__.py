"""
Storage layer: one CSV table per tracked network under the data directory.
"""

from .csv_store import GasPriceCsvStore
from .path_builder import CsvPathBuilder

__all__ = ["CsvPathBuilder", "GasPriceCsvStore"]
