"""Terminal front end for pacecalc."""

from pacecalc import __version__

__all__ = ["__version__"]
