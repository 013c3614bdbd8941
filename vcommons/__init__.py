"""Verus Commons project directory pipeline."""

__version__ = "0.1.0"
