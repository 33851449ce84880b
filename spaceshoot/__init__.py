"""A pygame space shooter: an arcade mode with high scores and a data-driven menu engine."""

__version__ = "0.1.0"