"""Lay out GUI widgets, save them as JSON and generate the matching UI code."""

__version__ = "0.1.10"