"""Domain services."""
from option_service.services.option_service import OptionService

__all__ = ["OptionService"]
