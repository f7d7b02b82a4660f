"""Database connection and models."""
from .connection import DatabaseManager, db
from .base_model import OptionRecord, StringIdOption, NumericIdOption

__all__ = [
    "DatabaseManager",
    "db",
    "OptionRecord",
    "StringIdOption",
    "NumericIdOption",
]
