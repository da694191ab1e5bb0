"""Mock generator service.

This module implements the MockGeneratorProtocol: it turns source text
into the source of one recording double per interface.

Pipeline:
1. Parse the source into top-level declarations
2. Select candidates: every Protocol plus every marked declaration
3. Validate all candidates; the first failure aborts the run
4. Per interface: extract operations, synthesize, assemble
5. Render the module: header, imports, doubles. Imports are the
   source's own imports plus the interfaces themselves when the
   configuration names their module

Developer Golden Rules:
1. ALL OR NOTHING - Nothing is returned unless every candidate is valid
2. DETERMINISM - The same source and configuration always yield
   byte-identical output
3. NO SHARED STATE - The service holds only immutable collaborators
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from structlog import get_logger

from mockgen.application.synthesis.artifacts import AssembledDouble
from mockgen.application.synthesis.assembler import DoubleAssembler
from mockgen.application.synthesis.preamble import make_preamble
from mockgen.config.generation_config import (
    DEFAULT_GENERATION_CONFIG,
    GenerationConfiguration,
)
from mockgen.domain.models.interface_declaration import (
    Declaration,
    InterfaceDeclaration,
    OtherDeclaration,
    ValidatedInterface,
)
from mockgen.domain.services.interface_validator import validate_interface
from mockgen.domain.services.operation_extractor import extract_operations

if TYPE_CHECKING:
    import libcst as cst

    from mockgen.application.ports.declaration_formatter import (
        DeclarationFormatterProtocol,
    )
    from mockgen.application.ports.source_parser import SourceParserProtocol

logger = get_logger(__name__)


def select_candidates(declarations: Iterable[Declaration]) -> list[Declaration]:
    """Declarations a double must be generated for, in source order.

    Every Protocol is a candidate. A declaration carrying the marker
    decorator is a candidate whatever its shape, so that the validator
    can reject it instead of silently skipping it.
    """
    return [
        declaration
        for declaration in declarations
        if isinstance(declaration, InterfaceDeclaration) or declaration.is_marked
    ]


def carried_imports(declarations: Iterable[Declaration]) -> list[str]:
    """Source text of the top-level imports, in source order."""
    return [
        declaration.statement
        for declaration in declarations
        if isinstance(declaration, OtherDeclaration)
        and declaration.statement is not None
    ]


class MockGeneratorService:
    """Service generating recording doubles from Python source.

    Example:
        >>> service = MockGeneratorService(
        ...     parser=LibcstSourceParser(),
        ...     formatter=LibcstDeclarationFormatter(),
        ... )
        >>> source = service.generate(protocol_source)
    """

    def __init__(
        self,
        parser: SourceParserProtocol,
        formatter: DeclarationFormatterProtocol,
        configuration: GenerationConfiguration | None = None,
    ) -> None:
        """Initialize the generator service.

        Args:
            parser: Turns source text into declarations.
            formatter: Renders the generated declarations.
            configuration: Naming and formatting policy. Defaults to
                DEFAULT_GENERATION_CONFIG.
        """
        self._parser = parser
        self._formatter = formatter
        self._config = configuration or DEFAULT_GENERATION_CONFIG
        self._assembler = DoubleAssembler(self._config)

    @property
    def configuration(self) -> GenerationConfiguration:
        """The configuration every generated double follows."""
        return self._config

    def generate(self, source: str) -> str:
        """Generate doubles for every interface declared in the source.

        Args:
            source: Python source text.

        Returns:
            Formatted source of the doubles, empty if the source declares
            no interface.

        Raises:
            SourceParseError: If the source is not valid Python.
            InterfaceValidationError: If a candidate cannot be mocked.
            OperationExtractionError: If operation identifiers collide.
        """
        return self.generate_declarations(self._parser.parse(source))

    def generate_declarations(self, declarations: Sequence[Declaration]) -> str:
        """Generate doubles for already parsed declarations.

        Args:
            declarations: Top-level declarations in source order.

        Returns:
            Formatted source of the doubles, empty if there is no candidate.

        Raises:
            InterfaceValidationError: If a candidate cannot be mocked.
            OperationExtractionError: If operation identifiers collide.
        """
        candidates = select_candidates(declarations)
        if not candidates:
            logger.info("no_interfaces_found", declaration_count=len(declarations))
            return ""

        interfaces = [self._validate(candidate) for candidate in candidates]
        doubles = [self._assemble(interface) for interface in interfaces]

        preamble = (
            make_preamble(
                doubles,
                imports=carried_imports(declarations),
                source_module=self._config.source_module,
            )
            if self._config.emit_imports
            else []
        )
        statements: list[cst.BaseStatement] = [
            *preamble,
            *(double.declaration for double in doubles),
        ]
        header = (
            [self._config.comments.file_header]
            if self._config.comments.file_header is not None
            else []
        )
        output = self._formatter.render(
            statements, indent=self._config.indent, header=header
        )
        logger.info(
            "generation_completed",
            doubles=[double.name for double in doubles],
        )
        return output

    def generate_double(self, declaration: Declaration) -> AssembledDouble:
        """Validate one declaration and assemble its double.

        Args:
            declaration: Candidate declaration.

        Returns:
            The assembled double, not yet rendered.

        Raises:
            InterfaceValidationError: If the declaration cannot be mocked.
            OperationExtractionError: If operation identifiers collide.
        """
        return self._assemble(self._validate(declaration))

    def _validate(self, declaration: Declaration) -> ValidatedInterface:
        interface = validate_interface(declaration)
        log = logger.bind(interface=interface.name)
        for member in interface.declaration.skipped_members:
            log.info("member_skipped", member=member)
        log.debug("interface_validated", operation_count=len(interface.operations))
        return interface

    def _assemble(self, interface: ValidatedInterface) -> AssembledDouble:
        log = logger.bind(interface=interface.name)
        double_name = self._config.double_name(interface.name)
        table = extract_operations(
            interface.operations,
            mock_name=double_name,
            reserved_names=self._config.reserved_member_names(),
        )
        double = self._assembler.assemble(interface, table)
        log.debug(
            "double_generated",
            double=double.name,
            operations=list(table.identifiers),
        )
        return double
