"""Composable builders for SQL query text: select, insert, update, delete and values."""

__version__ = "0.1.0"