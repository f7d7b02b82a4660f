# src/option_service/interfaces/id_generator.py
from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """
    Source of identifiers for options whose id is assigned before insert.

    Injected into the service so tests can supply a deterministic generator.
    """

    @abstractmethod
    def next(self) -> str:
        """Return a new identifier."""
        pass
