"""SourceParser stub for testing the generation service.

This module provides an in-memory stub implementation of the
SourceParserProtocol. It returns canned declarations instead of parsing,
so service tests can feed the pipeline shapes that are awkward to spell
as source text.

Developer Golden Rules:
1. OPERATION_TRACKING - Records every parsed source for test assertions
2. CONFIGURABLE - Canned declarations or a canned failure
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mockgen.domain.models.interface_declaration import Declaration


@dataclass(frozen=True)
class ParseCall:
    """Record of a parse call performed on the stub."""

    source: str


class SourceParserStub:
    """In-memory stub for SourceParserProtocol.

    Usage:
        stub = SourceParserStub([InterfaceDeclaration(name="Clock")])
        service = MockGeneratorService(parser=stub, formatter=formatter)
        service.generate("ignored")
        assert stub.calls == [ParseCall(source="ignored")]

        # Failure injection
        stub.set_failure(SourceParseError("unexpected token"))
    """

    def __init__(self, declarations: Sequence[Declaration] = ()) -> None:
        """Initialize the stub.

        Args:
            declarations: Declarations returned by every parse call.
        """
        self._declarations: list[Declaration] = list(declarations)
        self._failure: Exception | None = None
        self.calls: list[ParseCall] = []

    def set_declarations(self, declarations: Sequence[Declaration]) -> None:
        """Replace the canned declarations."""
        self._declarations = list(declarations)

    def set_failure(self, failure: Exception | None) -> None:
        """Make every parse call raise the given exception (None to clear)."""
        self._failure = failure

    def parse(self, source: str) -> list[Declaration]:
        """Record the call and return the canned declarations.

        Raises:
            Exception: The injected failure, if one is set.
        """
        self.calls.append(ParseCall(source=source))
        if self._failure is not None:
            raise self._failure
        return list(self._declarations)

    def clear(self) -> None:
        """Clear recorded calls and injected failures."""
        self.calls.clear()
        self._failure = None
