"""
Command-line interface for gql_automock.
"""

from .main import cli, main

__all__ = ["cli", "main"]
