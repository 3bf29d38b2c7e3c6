#!/usr/bin/env python3
"""Convenience runner for the GPS trip builder.

Usage:
    python run.py gps_data.csv
"""
import logging
import sys

from gps_trips.main import main

if __name__ == "__main__":
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    sys.exit(main())
