"""MockGenerator protocol: the generator's public contract."""

from __future__ import annotations

from typing import Protocol


class MockGeneratorProtocol(Protocol):
    """Protocol for generating recording doubles from source."""

    def generate(self, source: str) -> str:
        """Generate doubles for every interface declared in the source.

        Args:
            source: Python source text.

        Returns:
            Formatted source of the doubles, empty if the source declares
            no interface.

        Raises:
            MockgenError: If the source cannot be parsed or an interface
                cannot be mocked. Nothing is returned in that case.
        """
        ...
