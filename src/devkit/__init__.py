#!/usr/bin/env python3
"""Developer Kit: top-level command dispatcher and install sanity checks."""

__version__ = "0.4.0"
