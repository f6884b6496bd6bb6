"""Constant-product AMM price math, validation checks, keys, constants and event records."""

__version__ = "0.1.0"