from .date_utils import current_date_str, is_iso_date, utc_now, utc_today
from .units import GWEI_DECIMALS, format_gwei, format_units, parse_hex_quantity

__all__ = [
    "GWEI_DECIMALS",
    "current_date_str",
    "format_gwei",
    "format_units",
    "is_iso_date",
    "parse_hex_quantity",
    "utc_now",
    "utc_today",
]
