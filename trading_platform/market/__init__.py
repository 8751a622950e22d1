"""Simulated market of tradable securities."""

from .market import Market

__all__ = ['Market']
