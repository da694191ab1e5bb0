"""Infrastructure adapters for mockgen.

Adapters implement the ports defined in the application layer on top
of libcst.
"""

from mockgen.infrastructure.adapters.libcst_formatter import (
    LibcstDeclarationFormatter,
)
from mockgen.infrastructure.adapters.libcst_parser import LibcstSourceParser

__all__: list[str] = [
    "LibcstDeclarationFormatter",
    "LibcstSourceParser",
]
