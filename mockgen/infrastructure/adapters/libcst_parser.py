"""libcst implementation of the SourceParserProtocol.

Parses Python source into the abstract declaration model. Protocol
classes become InterfaceDeclarations; every other class becomes a
StructureDeclaration; any other top-level statement becomes an
OtherDeclaration.

Mapping:
- Interface: a class listing ``Protocol`` (bare, ``typing.`` or
  ``typing_extensions.``) among its bases
- Primary associated types: ``Protocol[T]``, ``Generic[T]`` or PEP 695
  type parameters
- Associated types: ``type X = ...``, ``X: TypeAlias = ...`` or a
  TypeVar / ParamSpec / TypeVarTuple assigned in the class body
- Can fail: the docstring documents raised exceptions (Google
  ``Raises:``, numpy ``Raises`` or Sphinx ``:raises``)
- Optional return: ``X | None``, ``Optional[X]`` or ``Union[..., None]``
- Operation: a method without decorators other than ``abstractmethod``
  and ``overload``; overload variants are flagged so validation can
  reject them
- Imports: top-level imports keep their source text so generated
  modules can repeat them; ``__future__`` imports are not carried
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Sequence

import libcst as cst
from structlog import get_logger

from mockgen.config.generation_config import DEFAULT_MARKER_DECORATOR
from mockgen.domain.errors.parsing import SourceParseError
from mockgen.domain.models.interface_declaration import (
    Declaration,
    InterfaceDeclaration,
    OperationSignature,
    OtherDeclaration,
    Parameter,
    ParameterKind,
    ReturnType,
    StructureDeclaration,
)

logger = get_logger(__name__)

PROTOCOL_NAMES = frozenset(
    {"Protocol", "typing.Protocol", "typing_extensions.Protocol"}
)
GENERIC_NAMES = frozenset({"Generic", "typing.Generic"})
OPTIONAL_NAMES = frozenset({"Optional", "typing.Optional"})
UNION_NAMES = frozenset({"Union", "typing.Union"})
TYPE_ALIAS_NAMES = frozenset(
    {"TypeAlias", "typing.TypeAlias", "typing_extensions.TypeAlias"}
)
TYPE_VARIABLE_FACTORIES = frozenset(
    {
        f"{prefix}{name}"
        for prefix in ("", "typing.", "typing_extensions.")
        for name in ("TypeVar", "ParamSpec", "TypeVarTuple")
    }
)
ABSTRACT_DECORATORS = frozenset({"abstractmethod", "abc.abstractmethod"})
OVERLOAD_DECORATORS = frozenset(
    {"overload", "typing.overload", "typing_extensions.overload"}
)

RAISES_PATTERN = re.compile(
    r"^\s*Raises\s*:?\s*$|:raises?[\s:]|:exception[\s:]",
    re.MULTILINE,
)

_EMPTY_MODULE = cst.Module(body=[])


def code_for(node: cst.CSTNode) -> str:
    """Source text of a node, without surrounding whitespace."""
    return _EMPTY_MODULE.code_for_node(node).strip()


def documents_raises(docstring: str | None) -> bool:
    """True when a docstring documents exceptions the method raises."""
    return docstring is not None and RAISES_PATTERN.search(docstring) is not None


def is_optional_annotation(annotation: cst.BaseExpression) -> bool:
    """True when an annotation admits None.

    Args:
        annotation: Annotation expression, possibly a string annotation.

    Returns:
        True for ``X | None``, ``Optional[X]``, ``Union[..., None]`` and
        string annotations spelling any of them.
    """
    if isinstance(annotation, cst.Name):
        return annotation.value == "None"
    if isinstance(annotation, cst.BinaryOperation) and isinstance(
        annotation.operator, cst.BitOr
    ):
        return is_optional_annotation(annotation.left) or is_optional_annotation(
            annotation.right
        )
    if isinstance(annotation, cst.Subscript):
        name = code_for(annotation.value)
        if name in OPTIONAL_NAMES:
            return True
        if name in UNION_NAMES:
            return any(
                isinstance(element.slice, cst.Index)
                and is_optional_annotation(element.slice.value)
                for element in annotation.slice
            )
        return False
    if isinstance(annotation, cst.SimpleString):
        value = annotation.evaluated_value
        if not isinstance(value, str):
            return False
        try:
            return is_optional_annotation(cst.parse_expression(value))
        except cst.ParserSyntaxError:
            return False
    return False


def _decorator_name(decorator: cst.Decorator) -> str:
    expression = decorator.decorator
    if isinstance(expression, cst.Call):
        expression = expression.func
    return code_for(expression)


def _is_future_import(node: cst.ImportFrom) -> bool:
    return (
        not node.relative
        and node.module is not None
        and code_for(node.module) == "__future__"
    )


def _subscript_elements(node: cst.Subscript) -> tuple[str, ...]:
    return tuple(code_for(element.slice) for element in node.slice)


def _is_stub_statement(node: cst.BaseSmallStatement) -> bool:
    if isinstance(node, cst.Pass):
        return True
    if isinstance(node, cst.Expr):
        return isinstance(
            node.value, (cst.Ellipsis, cst.SimpleString, cst.ConcatenatedString)
        )
    if isinstance(node, cst.Raise) and node.exc is not None:
        raised = node.exc.func if isinstance(node.exc, cst.Call) else node.exc
        return code_for(raised) == "NotImplementedError"
    return False


def has_implementation(function: cst.FunctionDef) -> bool:
    """True when a method body is more than a docstring and a stub marker.

    Stub markers are ``...``, ``pass`` and ``raise NotImplementedError``.
    """
    body = function.body
    if isinstance(body, cst.SimpleStatementSuite):
        return not all(_is_stub_statement(node) for node in body.body)
    for statement in body.body:
        if not isinstance(statement, cst.SimpleStatementLine):
            return True
        if not all(_is_stub_statement(node) for node in statement.body):
            return True
    return False


def _parameter(param: cst.Param, kind: ParameterKind) -> Parameter:
    return Parameter(
        name=param.name.value,
        annotation=(
            code_for(param.annotation.annotation)
            if param.annotation is not None
            else None
        ),
        default=code_for(param.default) if param.default is not None else None,
        kind=kind,
    )


class LibcstSourceParser:
    """Parses Python source into declarations using libcst.

    Usage:
        parser = LibcstSourceParser()
        declarations = parser.parse(source)
    """

    def __init__(self, marker_decorator: str = DEFAULT_MARKER_DECORATOR) -> None:
        """Initialize the parser.

        Args:
            marker_decorator: Name of the decorator requesting a double,
                matched bare, as an attribute or as a call.
        """
        self._marker_decorator = marker_decorator

    def parse(self, source: str) -> list[Declaration]:
        """Parse source text into top-level declarations.

        Args:
            source: Python source text.

        Returns:
            One declaration per top-level statement, in source order.

        Raises:
            SourceParseError: If the text is not valid Python.
        """
        try:
            module = cst.parse_module(source)
        except cst.ParserSyntaxError as exc:
            raise SourceParseError(
                exc.message, line=exc.raw_line, column=exc.raw_column
            ) from exc
        declarations = [self.convert_statement(statement) for statement in module.body]
        logger.debug("source_parsed", declaration_count=len(declarations))
        return declarations

    def convert_statement(self, statement: cst.BaseStatement) -> Declaration:
        """Classify one top-level statement."""
        if isinstance(statement, cst.ClassDef):
            return self.convert_class(statement)
        if isinstance(statement, cst.FunctionDef):
            return OtherDeclaration(
                kind="def",
                name=statement.name.value,
                is_marked=self._is_marked(statement.decorators),
            )
        if isinstance(statement, cst.SimpleStatementLine):
            return self._convert_simple(statement)
        return OtherDeclaration(kind=type(statement).__name__.lower())

    def convert_class(self, node: cst.ClassDef) -> Declaration:
        name = node.name.value
        is_marked = self._is_marked(node.decorators)
        bases = [arg.value for arg in node.bases if arg.keyword is None]
        if not any(self._base_name(base) in PROTOCOL_NAMES for base in bases):
            return StructureDeclaration(name=name, is_marked=is_marked)

        inherited: list[str] = []
        type_parameters: list[str] = []
        is_generic = False
        for base in bases:
            base_name = self._base_name(base)
            if base_name in PROTOCOL_NAMES or base_name in GENERIC_NAMES:
                if isinstance(base, cst.Subscript):
                    is_generic = True
                    type_parameters.extend(_subscript_elements(base))
            else:
                inherited.append(code_for(base))
        if node.type_parameters is not None:
            is_generic = True
            type_parameters.extend(
                param.param.name.value for param in node.type_parameters.params
            )

        operations: list[OperationSignature] = []
        associated_types: list[str] = []
        skipped: list[str] = []
        for member in node.body.body:
            self._convert_member(member, operations, associated_types, skipped)

        return InterfaceDeclaration(
            name=name,
            operations=tuple(operations),
            inherited=tuple(inherited),
            associated_types=tuple(associated_types),
            primary_associated_types=(
                tuple(dict.fromkeys(type_parameters)) if is_generic else None
            ),
            is_marked=is_marked,
            skipped_members=tuple(skipped),
        )

    def convert_function(self, node: cst.FunctionDef) -> OperationSignature | None:
        """Convert a method, None when it has no receiver parameter."""
        params = node.params
        positional = [
            *((param, ParameterKind.POSITIONAL_ONLY) for param in params.posonly_params),
            *((param, ParameterKind.POSITIONAL_OR_KEYWORD) for param in params.params),
        ]
        if not positional:
            return None
        receiver, _ = positional[0]

        parameters = [_parameter(param, kind) for param, kind in positional[1:]]
        if isinstance(params.star_arg, cst.Param):
            parameters.append(_parameter(params.star_arg, ParameterKind.VAR_POSITIONAL))
        parameters.extend(
            _parameter(param, ParameterKind.KEYWORD_ONLY)
            for param in params.kwonly_params
        )
        if params.star_kwarg is not None:
            parameters.append(_parameter(params.star_kwarg, ParameterKind.VAR_KEYWORD))

        return_type = None
        if node.returns is not None:
            annotation = node.returns.annotation
            text = code_for(annotation)
            if text != "None":
                return_type = ReturnType(
                    annotation=text,
                    is_optional=is_optional_annotation(annotation),
                )

        return OperationSignature(
            name=node.name.value,
            parameters=tuple(parameters),
            return_type=return_type,
            can_fail=documents_raises(node.get_docstring()),
            is_async=node.asynchronous is not None,
            receiver=receiver.name.value,
            has_implementation=has_implementation(node),
            type_parameters=(
                tuple(param.param.name.value for param in node.type_parameters.params)
                if node.type_parameters is not None
                else ()
            ),
        )

    def _convert_member(
        self,
        member: cst.BaseStatement,
        operations: list[OperationSignature],
        associated_types: list[str],
        skipped: list[str],
    ) -> None:
        if isinstance(member, cst.FunctionDef):
            decorators = [_decorator_name(item) for item in member.decorators]
            operation = None
            if all(
                name in ABSTRACT_DECORATORS or name in OVERLOAD_DECORATORS
                for name in decorators
            ):
                operation = self.convert_function(member)
            if operation is None:
                skipped.append(member.name.value)
            elif any(name in OVERLOAD_DECORATORS for name in decorators):
                operations.append(dataclasses.replace(operation, is_overload=True))
            else:
                operations.append(operation)
            return
        if isinstance(member, cst.ClassDef):
            skipped.append(member.name.value)
            return
        if not isinstance(member, cst.SimpleStatementLine):
            skipped.append(type(member).__name__.lower())
            return
        for node in member.body:
            if isinstance(node, cst.TypeAlias):
                associated_types.append(node.name.value)
            elif isinstance(node, cst.AnnAssign):
                target = code_for(node.target)
                if code_for(node.annotation.annotation) in TYPE_ALIAS_NAMES:
                    associated_types.append(target)
                else:
                    skipped.append(target)
            elif isinstance(node, cst.Assign):
                targets = [code_for(target.target) for target in node.targets]
                if (
                    isinstance(node.value, cst.Call)
                    and code_for(node.value.func) in TYPE_VARIABLE_FACTORIES
                ):
                    associated_types.extend(targets)
                else:
                    skipped.extend(targets)

    def _convert_simple(self, statement: cst.SimpleStatementLine) -> OtherDeclaration:
        node = statement.body[0]
        if isinstance(node, cst.ImportFrom) and _is_future_import(node):
            return OtherDeclaration(kind="future import")
        if isinstance(node, (cst.Import, cst.ImportFrom)):
            return OtherDeclaration(kind="import", statement=code_for(node))
        if isinstance(node, cst.TypeAlias):
            return OtherDeclaration(kind="type alias", name=node.name.value)
        if isinstance(node, cst.Assign):
            return OtherDeclaration(
                kind="assignment", name=code_for(node.targets[0].target)
            )
        if isinstance(node, cst.AnnAssign):
            return OtherDeclaration(kind="assignment", name=code_for(node.target))
        return OtherDeclaration(kind="statement")

    def _base_name(self, base: cst.BaseExpression) -> str:
        if isinstance(base, cst.Subscript):
            base = base.value
        return code_for(base)

    def _is_marked(self, decorators: Sequence[cst.Decorator]) -> bool:
        for decorator in decorators:
            name = _decorator_name(decorator)
            if name.rsplit(".", 1)[-1] == self._marker_decorator:
                return True
        return False
