"""Weighted membership groups, voting thresholds, deposits and multisig settings, in memory."""

__version__ = "0.1.0"