"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- SourceParserProtocol: source text to abstract declarations
- DeclarationFormatterProtocol: declaration trees to source text
- MockGeneratorProtocol: the generator's public contract
"""

from mockgen.application.ports.declaration_formatter import (
    DeclarationFormatterProtocol,
)
from mockgen.application.ports.mock_generator import MockGeneratorProtocol
from mockgen.application.ports.source_parser import SourceParserProtocol

__all__: list[str] = [
    "DeclarationFormatterProtocol",
    "MockGeneratorProtocol",
    "SourceParserProtocol",
]
