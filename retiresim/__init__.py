"""Retirement fund growth, depletion and withdrawal simulator."""

__version__ = "0.1.0"
