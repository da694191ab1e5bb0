"""
Pytest configuration and shared fixtures for mockgen tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layers
- Integration tests go in tests/integration/ and execute generated doubles
- Port stubs from mockgen.infrastructure.stubs replace adapters in service tests
"""

from __future__ import annotations

import pytest

from mockgen.config.generation_config import GenerationConfiguration
from mockgen.domain.models.interface_declaration import (
    InterfaceDeclaration,
    OperationSignature,
    Parameter,
    ReturnType,
)

TEST_PROTOCOL_SOURCE = '''\
from typing import Protocol


class TestProtocol(Protocol):
    def get_string(self, index: int) -> str:
        """Return the string at an index.

        Raises:
            IndexError: If the index is out of range.
        """
        ...

    def get_integer(self) -> int: ...
'''


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from mockgen import __version__

    return __version__


@pytest.fixture
def config() -> GenerationConfiguration:
    """Default generation configuration."""
    return GenerationConfiguration()


@pytest.fixture
def test_protocol_source() -> str:
    """Source of a protocol with one failing and one plain operation."""
    return TEST_PROTOCOL_SOURCE


@pytest.fixture
def test_protocol() -> InterfaceDeclaration:
    """Abstract model of the protocol in test_protocol_source."""
    return InterfaceDeclaration(
        name="TestProtocol",
        operations=(
            OperationSignature(
                name="get_string",
                parameters=(Parameter(name="index", annotation="int"),),
                return_type=ReturnType(annotation="str"),
                can_fail=True,
            ),
            OperationSignature(
                name="get_integer",
                return_type=ReturnType(annotation="int"),
            ),
        ),
    )
