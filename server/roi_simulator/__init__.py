"""Invoicing ROI simulator: validation, projection, scenario storage and reports."""

__version__ = "1.0.0"
