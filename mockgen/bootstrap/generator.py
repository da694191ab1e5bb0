"""Bootstrap wiring for the mock generator."""

from __future__ import annotations

from mockgen.application.ports.mock_generator import MockGeneratorProtocol
from mockgen.application.services.mock_generator_service import MockGeneratorService
from mockgen.config.generation_config import (
    DEFAULT_GENERATION_CONFIG,
    GenerationConfiguration,
)
from mockgen.infrastructure.adapters.libcst_formatter import (
    LibcstDeclarationFormatter,
)
from mockgen.infrastructure.adapters.libcst_parser import LibcstSourceParser

_generator: MockGeneratorProtocol | None = None


def create_generator(
    config: GenerationConfiguration | None = None,
) -> MockGeneratorService:
    """Create a generator wired to the libcst adapters.

    Args:
        config: Generation configuration. Defaults to DEFAULT_GENERATION_CONFIG.
    """
    config = config or DEFAULT_GENERATION_CONFIG
    return MockGeneratorService(
        parser=LibcstSourceParser(marker_decorator=config.marker_decorator),
        formatter=LibcstDeclarationFormatter(),
        configuration=config,
    )


def get_generator() -> MockGeneratorProtocol:
    """Get the default generator instance."""
    global _generator
    if _generator is None:
        _generator = create_generator()
    return _generator


def set_generator(generator: MockGeneratorProtocol) -> None:
    """Set custom generator (testing override)."""
    global _generator
    _generator = generator


def reset_generator() -> None:
    """Reset generator singleton."""
    global _generator
    _generator = None
