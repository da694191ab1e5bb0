"""mockgen - recording test doubles for typing.Protocol interfaces.

Usage:
    import mockgen

    source = mockgen.generate(protocol_source)

The generated module declares one ``<Interface>Mock`` class per
Protocol. Each double records its invocations, returns configured stubs
and raises configured failures.
"""

from __future__ import annotations

from mockgen.config.generation_config import (
    DEFAULT_GENERATION_CONFIG,
    GenerationConfiguration,
)
from mockgen.domain.exceptions import MockgenError
from mockgen.runtime import MissingStubError, mockable

__version__ = "0.1.0"


def generate(source: str, config: GenerationConfiguration | None = None) -> str:
    """Generate recording doubles for the Protocols declared in source.

    Args:
        source: Python source text.
        config: Generation configuration. Defaults to DEFAULT_GENERATION_CONFIG.

    Returns:
        Source of the generated doubles, empty when the source declares
        no Protocol.

    Raises:
        MockgenError: If the source cannot be parsed or a Protocol cannot
            be mocked.
    """
    from mockgen.bootstrap.generator import create_generator, get_generator

    generator = get_generator() if config is None else create_generator(config)
    return generator.generate(source)


__all__ = [
    "DEFAULT_GENERATION_CONFIG",
    "GenerationConfiguration",
    "MissingStubError",
    "MockgenError",
    "__version__",
    "generate",
    "mockable",
]
