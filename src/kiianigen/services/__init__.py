"""Services for kiianigen: generating and writing device configs."""

from kiianigen.services.generation_service import GenerationResult, GenerationService
from kiianigen.services.trigger_service import TriggerService

__all__ = [
    "GenerationResult",
    "GenerationService",
    "TriggerService",
]
