"""GraphQuest: a console adventure over a graph of scenarios, with its small container and text helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]