"""Domain services for mockgen.

- interface_validator: rejects unsupported interface shapes
- operation_extractor: assigns collision-free operation identifiers
"""

from mockgen.domain.services.interface_validator import validate_interface
from mockgen.domain.services.operation_extractor import extract_operations

__all__: list[str] = ["extract_operations", "validate_interface"]
