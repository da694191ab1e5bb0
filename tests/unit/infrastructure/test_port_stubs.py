"""Unit tests for the port stubs."""

from __future__ import annotations

import libcst as cst
import pytest

from mockgen.domain.errors import SourceParseError
from mockgen.domain.models.interface_declaration import InterfaceDeclaration
from mockgen.infrastructure.stubs import (
    DeclarationFormatterStub,
    ParseCall,
    SourceParserStub,
)


class TestSourceParserStub:
    """Tests for SourceParserStub."""

    def test_returns_canned_declarations(self) -> None:
        """parse returns the declarations given at construction."""
        clock = InterfaceDeclaration(name="Clock")
        stub = SourceParserStub([clock])

        assert stub.parse("anything") == [clock]
        assert stub.calls == [ParseCall(source="anything")]

    def test_set_declarations(self) -> None:
        """Canned declarations can be replaced."""
        stub = SourceParserStub()
        stub.set_declarations([InterfaceDeclaration(name="Clock")])

        assert [d.name for d in stub.parse("")] == ["Clock"]

    def test_failure_injection(self) -> None:
        """An injected failure is raised and the call is still recorded."""
        stub = SourceParserStub()
        stub.set_failure(SourceParseError("unexpected token"))

        with pytest.raises(SourceParseError):
            stub.parse("class")

        assert len(stub.calls) == 1

    def test_clear(self) -> None:
        """clear forgets calls and failures."""
        stub = SourceParserStub()
        stub.set_failure(SourceParseError("unexpected token"))
        stub.clear()

        assert stub.parse("") == []
        assert stub.calls == [ParseCall(source="")]


class TestDeclarationFormatterStub:
    """Tests for DeclarationFormatterStub."""

    def test_records_calls(self) -> None:
        """Every render call is recorded with its arguments."""
        stub = DeclarationFormatterStub()
        trees = [cst.parse_statement("class ClockMock:\n    pass\n")]

        code = stub.render(trees, indent="\t", header=["Generated"])

        assert code == "class ClockMock:\n\tpass\n"
        assert stub.last_call is not None
        assert stub.last_call.class_names == ["ClockMock"]
        assert stub.last_call.indent == "\t"
        assert stub.last_call.header == ("Generated",)

    def test_empty_render(self) -> None:
        """Nothing renders as empty text."""
        stub = DeclarationFormatterStub()

        assert stub.render([]) == ""
        assert len(stub.calls) == 1

    def test_clear(self) -> None:
        """clear forgets calls."""
        stub = DeclarationFormatterStub()
        stub.render([])
        stub.clear()

        assert stub.last_call is None
