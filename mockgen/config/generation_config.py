"""Generation configuration.

This module defines the naming, comment and formatting policy of a
generation run. A configuration is an immutable value passed explicitly
to every component; there is no process-wide default instance that
generation reads or writes.

Environment Variables (read only by GenerationConfiguration.from_environment):
- MOCKGEN_ACTION_TYPE: Invocation-log type name (default: Action)
- MOCKGEN_ACTION_FIELD: Invocation-log field name (default: invocations)
- MOCKGEN_STUB_TYPE: Stub-store type name (default: Stubs)
- MOCKGEN_STUB_FIELD: Stub-store field name (default: stubs)
- MOCKGEN_ERROR_TYPE: Failure-store type name (default: Errors)
- MOCKGEN_ERROR_FIELD: Failure-store field name (default: errors)
- MOCKGEN_NESTED_TYPES_HEADER: Nested-types section comment (default: Nested types)
- MOCKGEN_DOUBLE_SUFFIX: Suffix appended to the interface name (default: Mock)
- MOCKGEN_INDENT_WIDTH: Spaces per indentation level (default: 4, min: 1, max: 8)
- MOCKGEN_USE_TABS: Indent with tabs instead of spaces (default: false)
- MOCKGEN_SOURCE_MODULE: Module the generated doubles import their
  interfaces from (default: unset)
"""

from __future__ import annotations

import keyword
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# =============================================================================
# Naming defaults
# =============================================================================

DEFAULT_ACTION_TYPE = "Action"
DEFAULT_ACTION_FIELD = "invocations"
DEFAULT_STUB_TYPE = "Stubs"
DEFAULT_STUB_FIELD = "stubs"
DEFAULT_ERROR_TYPE = "Errors"
DEFAULT_ERROR_FIELD = "errors"
DEFAULT_NESTED_TYPES_HEADER = "Nested types"
DEFAULT_DOUBLE_SUFFIX = "Mock"
DEFAULT_MARKER_DECORATOR = "mockable"

# =============================================================================
# Formatting defaults
# =============================================================================

DEFAULT_INDENT_WIDTH = 4
MIN_INDENT_WIDTH = 1
MAX_INDENT_WIDTH = 8


def _get_env(key: str, default: str) -> str:
    """Get string environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or empty.

    Returns:
        The variable value or default.
    """
    value = os.environ.get(key)
    return value if value else default


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    value = os.environ.get(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _require_identifier(value: str) -> str:
    if not value.isidentifier() or keyword.iskeyword(value):
        raise ValueError(f"must be a valid Python identifier, got {value!r}")
    return value


class _Naming(BaseModel):
    """Type and field name of one generated store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_name: str
    field_name: str

    @field_validator("type_name", "field_name")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Validate names are usable as Python identifiers."""
        return _require_identifier(v)


class ActionNaming(_Naming):
    """Naming of the invocation log.

    Attributes:
        type_name: Name of the nested case-set class.
        field_name: Name of the read-only log property. The backing list
            is stored under the same name prefixed with an underscore.
    """

    type_name: str = DEFAULT_ACTION_TYPE
    field_name: str = DEFAULT_ACTION_FIELD

    @property
    def storage_name(self) -> str:
        """Name of the private list the double appends to."""
        return f"_{self.field_name}"


class StubNaming(_Naming):
    """Naming of the stub-value store."""

    type_name: str = DEFAULT_STUB_TYPE
    field_name: str = DEFAULT_STUB_FIELD


class ErrorNaming(_Naming):
    """Naming of the failure store."""

    type_name: str = DEFAULT_ERROR_TYPE
    field_name: str = DEFAULT_ERROR_FIELD


class CommentPolicy(BaseModel):
    """Comments emitted into generated code.

    Attributes:
        nested_types_header: Comment text introducing the nested-types block.
        conformance_header: Whether to introduce the methods with a
            ``# <Interface>`` comment.
        file_header: Optional comment placed at the top of generated modules.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    nested_types_header: str = DEFAULT_NESTED_TYPES_HEADER
    conformance_header: bool = True
    file_header: str | None = None

    @field_validator("nested_types_header", "file_header")
    @classmethod
    def validate_single_line(cls, v: str | None) -> str | None:
        """Validate comment texts fit on one line."""
        if v is not None and ("\n" in v or "\r" in v):
            raise ValueError("comment text must be a single line")
        return v


class GenerationConfiguration(BaseModel):
    """Configuration of one generation run.

    Immutable once constructed. Pass it to the generator service; every
    component receives it, or the part of it it needs, as a parameter.

    Attributes:
        action: Invocation-log naming (default Action / invocations).
        stub: Stub-store naming (default Stubs / stubs).
        errors: Failure-store naming (default Errors / errors).
        comments: Comment and header policy.
        double_suffix: Appended to the interface name to name the double.
        marker_decorator: Decorator name that explicitly requests a double.
        indent_width: Spaces per indentation level.
        use_tabs: Indent with tabs; overrides indent_width.
        emit_imports: Prefix generated modules with the imports they need.
        source_module: Dotted name of the module declaring the interfaces.
            When set, generated modules import every mocked interface
            from it; otherwise the interfaces must already be in scope.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    action: ActionNaming = Field(default_factory=ActionNaming)
    stub: StubNaming = Field(default_factory=StubNaming)
    errors: ErrorNaming = Field(default_factory=ErrorNaming)
    comments: CommentPolicy = Field(default_factory=CommentPolicy)
    double_suffix: str = DEFAULT_DOUBLE_SUFFIX
    marker_decorator: str = DEFAULT_MARKER_DECORATOR
    indent_width: int = Field(
        default=DEFAULT_INDENT_WIDTH, ge=MIN_INDENT_WIDTH, le=MAX_INDENT_WIDTH
    )
    use_tabs: bool = False
    emit_imports: bool = True
    source_module: str | None = None

    @field_validator("double_suffix")
    @classmethod
    def validate_suffix(cls, v: str) -> str:
        """Validate the suffix keeps double names valid identifiers."""
        if not v or not f"X{v}".isidentifier():
            raise ValueError(f"double_suffix must continue an identifier, got {v!r}")
        return v

    @field_validator("source_module")
    @classmethod
    def validate_source_module(cls, v: str | None) -> str | None:
        """Validate the source module is an absolute dotted module name."""
        if v is None:
            return v
        for part in v.split("."):
            try:
                _require_identifier(part)
            except ValueError:
                raise ValueError(
                    f"source_module must be a dotted module name, got {v!r}"
                ) from None
        return v

    @field_validator("marker_decorator")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Validate the marker decorator name."""
        return _require_identifier(v)

    @model_validator(mode="after")
    def validate_distinct_names(self) -> GenerationConfiguration:
        """Validate generated member names do not collide with each other."""
        names = [
            self.action.type_name,
            self.action.field_name,
            self.action.storage_name,
            self.stub.type_name,
            self.stub.field_name,
            self.errors.type_name,
            self.errors.field_name,
        ]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(
                f"generated member names must be distinct, got duplicates: "
                f"{', '.join(duplicates)}"
            )
        return self

    @property
    def indent(self) -> str:
        """One level of indentation as rendered in generated code."""
        return "\t" if self.use_tabs else " " * self.indent_width

    def double_name(self, interface_name: str) -> str:
        """Name of the double generated for an interface.

        Args:
            interface_name: Name of the protocol.

        Returns:
            The interface name followed by the configured suffix.
        """
        return f"{interface_name}{self.double_suffix}"

    def reserved_member_names(self) -> dict[str, str]:
        """Member names the double declares besides the interface methods.

        Returns:
            Mapping of member name to a description of its role.
        """
        return {
            "__init__": "initializer",
            self.action.type_name: "invocation log type",
            self.action.field_name: "invocation log",
            self.action.storage_name: "invocation log storage",
            self.stub.type_name: "stub store type",
            self.stub.field_name: "stub store",
            self.errors.type_name: "failure store type",
            self.errors.field_name: "failure store",
        }

    @classmethod
    def from_environment(cls) -> GenerationConfiguration:
        """Create config from environment variables with defaults.

        Returns:
            GenerationConfiguration with values from environment or defaults.
            Indent width is clamped to its valid range.

        Raises:
            pydantic.ValidationError: If a name from the environment is not
                a valid identifier.
        """
        indent_width = _get_int_env("MOCKGEN_INDENT_WIDTH", DEFAULT_INDENT_WIDTH)
        # Clamp to valid range
        indent_width = max(MIN_INDENT_WIDTH, min(indent_width, MAX_INDENT_WIDTH))

        return cls(
            action=ActionNaming(
                type_name=_get_env("MOCKGEN_ACTION_TYPE", DEFAULT_ACTION_TYPE),
                field_name=_get_env("MOCKGEN_ACTION_FIELD", DEFAULT_ACTION_FIELD),
            ),
            stub=StubNaming(
                type_name=_get_env("MOCKGEN_STUB_TYPE", DEFAULT_STUB_TYPE),
                field_name=_get_env("MOCKGEN_STUB_FIELD", DEFAULT_STUB_FIELD),
            ),
            errors=ErrorNaming(
                type_name=_get_env("MOCKGEN_ERROR_TYPE", DEFAULT_ERROR_TYPE),
                field_name=_get_env("MOCKGEN_ERROR_FIELD", DEFAULT_ERROR_FIELD),
            ),
            comments=CommentPolicy(
                nested_types_header=_get_env(
                    "MOCKGEN_NESTED_TYPES_HEADER", DEFAULT_NESTED_TYPES_HEADER
                ),
            ),
            double_suffix=_get_env("MOCKGEN_DOUBLE_SUFFIX", DEFAULT_DOUBLE_SUFFIX),
            indent_width=indent_width,
            use_tabs=_get_bool_env("MOCKGEN_USE_TABS", False),
            source_module=os.environ.get("MOCKGEN_SOURCE_MODULE") or None,
        )


# Default configuration (Action / invocations, Stubs / stubs, Errors / errors)
DEFAULT_GENERATION_CONFIG = GenerationConfiguration()

# Tab-indented output
TAB_INDENTED_CONFIG = GenerationConfiguration(use_tabs=True)
