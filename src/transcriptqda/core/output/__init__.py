from .output_service import (
    OutputService,
    OutputStructure,
    create_output_service,
    create_output_structure,
)

__all__ = [
    "OutputService",
    "OutputStructure",
    "create_output_service",
    "create_output_structure",
]
