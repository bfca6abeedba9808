"""Periodic link-quality scoring and reporting for a connected wifi session."""

__version__ = "0.1.0"
