# src/option_service/interfaces/__init__.py
from .id_generator import IIdGenerator
from .repository import IOptionRepository

__all__ = [
    "IIdGenerator",
    "IOptionRepository",
]
