"""Holdem server - HTTP API and command line surfaces for the identity core."""

__version__ = "1.0.0"
