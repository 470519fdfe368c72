#!/usr/bin/env python3
"""
Environment validation script for the gas tracker.
Run before installing the cron entry.
"""

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Configure basic logging
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def validate_environment():
    """Validate the provider API key is available."""
    load_dotenv()

    if not os.getenv("ALCHEMY_API_KEY"):
        logger.error("Missing required environment variable: ALCHEMY_API_KEY")
        logger.error("Set it in the environment or in a .env file next to config/")
        return False

    logger.info("✅ Environment validation passed")
    return True


def check_data_dir():
    """Check the data directory exists or can be created."""
    data_dir = Path(os.getenv("GAS_TRACKER_DATA_DIR", "data"))

    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Cannot create data directory {data_dir}: {e}")
        return False

    if not os.access(data_dir, os.W_OK):
        logger.error(f"Data directory is not writable: {data_dir}")
        return False

    logger.info(f"✅ Data directory ready: {data_dir}")
    return True


def check_config_files():
    """Report whether the optional config file is present."""
    config_file = Path(os.getenv("GAS_TRACKER_CONFIG_DIR", "config")) / "tracker.yaml"

    if not config_file.exists():
        logger.warning(f"{config_file} not found, built-in defaults will be used")
    else:
        logger.info(f"✅ Found {config_file}")
    return True


if __name__ == "__main__":
    logger.info("Starting environment validation...")

    success = True
    success &= validate_environment()
    success &= check_data_dir()
    success &= check_config_files()

    if success:
        logger.info("🎉 All validation checks passed!")
        sys.exit(0)
    else:
        logger.error("❌ Validation failed")
        sys.exit(1)
