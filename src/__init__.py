"""htmlvalid — batch HTML/CSS validation against the W3C services."""

from htmlvalid.version import __version__

__all__ = ["__version__"]
