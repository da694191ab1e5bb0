"""Unit tests for MockGeneratorService.

The parser and formatter ports are replaced by in-memory stubs so the
pipeline can be driven with hand-built declarations.
"""

from __future__ import annotations

import pytest

from mockgen.application.services.mock_generator_service import (
    MockGeneratorService,
    select_candidates,
)
from mockgen.config.generation_config import CommentPolicy, GenerationConfiguration
from mockgen.domain.errors import (
    DuplicateOperationIdentifierError,
    InterfaceIsInheritedError,
    NotAnInterfaceError,
    OperationNameConflictError,
    SourceParseError,
)
from mockgen.domain.models.interface_declaration import (
    Declaration,
    InterfaceDeclaration,
    OperationSignature,
    OtherDeclaration,
    StructureDeclaration,
)
from mockgen.infrastructure.stubs import (
    DeclarationFormatterStub,
    ParseCall,
    SourceParserStub,
)


@pytest.fixture
def formatter() -> DeclarationFormatterStub:
    return DeclarationFormatterStub()


def make_service(
    declarations: list[Declaration],
    formatter: DeclarationFormatterStub,
    config: GenerationConfiguration | None = None,
) -> tuple[MockGeneratorService, SourceParserStub]:
    parser = SourceParserStub(declarations)
    return MockGeneratorService(parser, formatter, config), parser


class TestSelectCandidates:
    """Tests for select_candidates."""

    def test_protocols_and_marked_declarations(self) -> None:
        """Protocols are always candidates; other shapes only when marked."""
        protocol = InterfaceDeclaration(name="Clock")
        marked = StructureDeclaration(name="Service", is_marked=True)
        declarations = [
            OtherDeclaration(kind="import"),
            protocol,
            StructureDeclaration(name="Plain"),
            marked,
        ]

        assert select_candidates(declarations) == [protocol, marked]


class TestGenerate:
    """Tests for MockGeneratorService.generate()."""

    def test_parses_the_given_source(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """The source text is handed to the parser unchanged."""
        service, parser = make_service([test_protocol], formatter)

        service.generate("class TestProtocol(Protocol): ...")

        assert parser.calls == [ParseCall(source="class TestProtocol(Protocol): ...")]

    def test_one_double_per_interface_in_source_order(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Doubles follow the order of their interfaces."""
        declarations = [
            InterfaceDeclaration(name="Second"),
            StructureDeclaration(name="Ignored"),
            InterfaceDeclaration(name="First"),
        ]
        service, _ = make_service(declarations, formatter)

        service.generate("")

        assert formatter.last_call is not None
        assert formatter.last_call.class_names == ["SecondMock", "FirstMock"]

    def test_no_interfaces_yields_empty_output(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Without candidates nothing is rendered."""
        service, _ = make_service([StructureDeclaration(name="Plain")], formatter)

        assert service.generate("") == ""
        assert formatter.calls == []

    def test_preamble_precedes_doubles(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """Imports come first in the rendered module."""
        service, _ = make_service([test_protocol], formatter)

        output = service.generate("")

        assert output.startswith(
            "from __future__ import annotations\n"
            "import dataclasses\n"
            "from mockgen.runtime import MissingStubError\n"
        )
        assert "class TestProtocolMock(TestProtocol):" in output

    def test_imports_can_be_disabled(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """emit_imports=False renders the doubles alone."""
        config = GenerationConfiguration(emit_imports=False)
        service, _ = make_service([test_protocol], formatter, config)

        output = service.generate("")

        assert output.startswith("class TestProtocolMock(TestProtocol):")

    def test_source_imports_and_interface_import(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """Source imports are carried and interfaces imported from source_module."""
        declarations = [
            OtherDeclaration(kind="future import"),
            OtherDeclaration(kind="import", statement="from typing import Protocol"),
            test_protocol,
        ]
        config = GenerationConfiguration(source_module="app.ports")
        service, _ = make_service(declarations, formatter, config)

        output = service.generate("")

        assert output.startswith(
            "from __future__ import annotations\n"
            "from typing import Protocol\n"
            "from app.ports import TestProtocol\n"
            "import dataclasses\n"
        )

    def test_carried_imports_are_dropped_with_emit_imports_off(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        declarations = [
            OtherDeclaration(kind="import", statement="import datetime"),
            test_protocol,
        ]
        config = GenerationConfiguration(emit_imports=False, source_module="app")
        service, _ = make_service(declarations, formatter, config)

        output = service.generate("")

        assert "import" not in output.split("class TestProtocolMock", 1)[0]

    def test_indent_and_header_are_passed_to_formatter(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """Formatting policy comes from the configuration."""
        config = GenerationConfiguration(
            use_tabs=True,
            comments=CommentPolicy(file_header="Generated by mockgen. Do not edit."),
        )
        service, _ = make_service([test_protocol], formatter, config)

        service.generate("")

        assert formatter.last_call is not None
        assert formatter.last_call.indent == "\t"
        assert formatter.last_call.header == ("Generated by mockgen. Do not edit.",)

    def test_parse_failure_propagates(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Parser errors abort the run."""
        service, parser = make_service([], formatter)
        parser.set_failure(SourceParseError("unexpected token", line=1, column=1))

        with pytest.raises(SourceParseError):
            service.generate("class (")

        assert formatter.calls == []

    def test_invalid_candidate_aborts_the_whole_run(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """One invalid interface means no output for any interface."""
        declarations = [
            test_protocol,
            InterfaceDeclaration(name="Child", inherited=("TestProtocol",)),
        ]
        service, _ = make_service(declarations, formatter)

        with pytest.raises(InterfaceIsInheritedError):
            service.generate("")

        assert formatter.calls == []

    def test_marked_structure_is_rejected(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Marking a class that is not a Protocol is an error."""
        service, _ = make_service(
            [StructureDeclaration(name="Service", is_marked=True)], formatter
        )

        with pytest.raises(NotAnInterfaceError):
            service.generate("")

    def test_colliding_operations_are_rejected(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Identifier collisions surface as extraction errors."""
        declaration = InterfaceDeclaration(
            name="Caller",
            operations=(
                OperationSignature(name="__call__"),
                OperationSignature(name="call"),
            ),
        )
        service, _ = make_service([declaration], formatter)

        with pytest.raises(DuplicateOperationIdentifierError):
            service.generate("")

    def test_reserved_names_are_rejected(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """An operation named like a store conflicts with the double."""
        declaration = InterfaceDeclaration(
            name="Registry", operations=(OperationSignature(name="stubs"),)
        )
        service, _ = make_service([declaration], formatter)

        with pytest.raises(OperationNameConflictError):
            service.generate("")

    def test_output_is_deterministic(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """The same input always yields the same text."""
        service, _ = make_service([test_protocol], formatter)

        assert service.generate("") == service.generate("")


class TestGenerateDouble:
    """Tests for MockGeneratorService.generate_double()."""

    def test_returns_assembled_double(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """A single declaration is validated and assembled, not rendered."""
        service, _ = make_service([], formatter)

        double = service.generate_double(test_protocol)

        assert double.name == "TestProtocolMock"
        assert double.declaration.name.value == "TestProtocolMock"
        assert formatter.calls == []

    def test_uses_configured_suffix(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """The double name follows the configuration."""
        service, _ = make_service(
            [], formatter, GenerationConfiguration(double_suffix="Spy")
        )

        assert service.generate_double(test_protocol).name == "TestProtocolSpy"

    def test_rejects_non_interfaces(
        self, formatter: DeclarationFormatterStub
    ) -> None:
        """Only protocols can be assembled."""
        service, _ = make_service([], formatter)

        with pytest.raises(NotAnInterfaceError):
            service.generate_double(OtherDeclaration(kind="def", name="helper"))


class TestGenerateDeclarations:
    """Tests for MockGeneratorService.generate_declarations()."""

    def test_bypasses_the_parser(
        self, formatter: DeclarationFormatterStub, test_protocol: InterfaceDeclaration
    ) -> None:
        """Already parsed declarations skip parsing."""
        service, parser = make_service([], formatter)

        output = service.generate_declarations([test_protocol])

        assert parser.calls == []
        assert "class TestProtocolMock(TestProtocol):" in output
