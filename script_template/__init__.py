"""Boilerplate for small operational command-line scripts.

Terminal output goes through Rich and prompts through Typer. The flag
scanner is hand-rolled so that scanning stops exactly at the first
positional argument or ``--``.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
