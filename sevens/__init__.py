"""Simulation of the card game Sevens and its spades variant with competing strategies."""

__version__ = "0.1.0"