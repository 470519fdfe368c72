#!/usr/bin/env python3
"""
Cron wrapper for the collector, e.g.

    0 12 * * * cd /srv/gas-tracker && .venv/bin/python scripts/collect_gas_prices.py
"""

import sys

from gas_tracker.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
