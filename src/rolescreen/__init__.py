"""Deterministic résumé screening against weighted role criteria."""

__version__ = "0.1.0"
