"""
Unit Conversion
===============

Exact conversion of on-chain integer quantities (wei) into decimal display
strings. Integer arithmetic only: a float would silently round large values.
"""

GWEI_DECIMALS = 9


def format_units(value: int, decimals: int) -> str:
    """
    Format an integer amount of base units as a decimal string.

    The fractional part is left-padded to `decimals` digits and trailing zeros
    are stripped; no decimal point is emitted for whole amounts.

    Args:
        value: Amount in base units (e.g. wei)
        decimals: Number of decimals of the display unit

    Returns:
        Decimal string, e.g. format_units(1_500_000_000, 9) == "1.5"
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    negative = value < 0
    digits = str(abs(value)).rjust(decimals + 1, "0")

    integer = digits[: len(digits) - decimals] if decimals else digits
    fraction = digits[len(digits) - decimals :].rstrip("0") if decimals else ""

    text = f"{integer}.{fraction}" if fraction else integer
    return f"-{text}" if negative else text


def format_gwei(wei: int) -> str:
    """Format a wei amount in gwei."""
    return format_units(wei, GWEI_DECIMALS)


def parse_hex_quantity(value: str) -> int:
    """
    Parse a JSON-RPC hex quantity ("0x3b9aca00") into an int.

    Raises:
        ValueError: If value is not a 0x-prefixed hex string
    """
    if not isinstance(value, str) or not value.lower().startswith("0x"):
        raise ValueError(f"Not a hex quantity: {value!r}")
    digits = value[2:]
    if not digits:
        raise ValueError(f"Empty hex quantity: {value!r}")
    return int(digits, 16)
