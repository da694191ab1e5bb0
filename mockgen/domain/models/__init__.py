"""Domain models for mockgen."""

from mockgen.domain.models.interface_declaration import (
    Declaration,
    InterfaceDeclaration,
    OperationSignature,
    OtherDeclaration,
    Parameter,
    ParameterKind,
    ReturnType,
    StructureDeclaration,
    ValidatedInterface,
)
from mockgen.domain.models.operation_descriptor import (
    OperationDescriptor,
    OperationKey,
    OperationTable,
)

__all__: list[str] = [
    "Declaration",
    "InterfaceDeclaration",
    "OperationDescriptor",
    "OperationKey",
    "OperationSignature",
    "OperationTable",
    "OtherDeclaration",
    "Parameter",
    "ParameterKind",
    "ReturnType",
    "StructureDeclaration",
    "ValidatedInterface",
]
