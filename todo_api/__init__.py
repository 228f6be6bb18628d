"""CRUD REST backend for todo items."""

__version__ = "0.1.0"
