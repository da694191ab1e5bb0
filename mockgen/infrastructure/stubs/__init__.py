"""Infrastructure stubs for testing.

This module provides stub implementations of the application ports.

Available stubs:
- SourceParserStub: Canned declarations, call tracking, failure injection
- DeclarationFormatterStub: Records rendered declarations

WARNING: These stubs are NOT for production use.
Production implementations are in mockgen/infrastructure/adapters/.
"""

from mockgen.infrastructure.stubs.declaration_formatter_stub import (
    DeclarationFormatterStub,
    RenderCall,
)
from mockgen.infrastructure.stubs.source_parser_stub import (
    ParseCall,
    SourceParserStub,
)

__all__: list[str] = [
    "DeclarationFormatterStub",
    "ParseCall",
    "RenderCall",
    "SourceParserStub",
]
