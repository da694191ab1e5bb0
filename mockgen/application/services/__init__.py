"""Application services for mockgen."""

from mockgen.application.services.mock_generator_service import (
    MockGeneratorService,
    select_candidates,
)

__all__: list[str] = [
    "MockGeneratorService",
    "select_candidates",
]
