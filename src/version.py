# src/version.py — v1
"""Program version, shown in the CLI header and --version output."""

__version__ = "1.0.0"
