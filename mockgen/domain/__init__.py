"""
Domain layer - Pure generation logic for mockgen.

This layer contains:
- The abstract interface-declaration model
- The per-operation descriptor model
- Validation and extraction services
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure,
config or bootstrap, and must not depend on the syntax-tree library.
Only stdlib, typing and structlog imports are allowed.
"""

from mockgen.domain.exceptions import MockgenError

__all__: list[str] = ["MockgenError"]
