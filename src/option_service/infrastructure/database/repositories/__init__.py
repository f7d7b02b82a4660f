"""Database repository implementations."""
from .base import BaseRepository, transactional
from .option import OptionRepository

__all__ = [
    "BaseRepository",
    "transactional",
    "OptionRepository",
]
