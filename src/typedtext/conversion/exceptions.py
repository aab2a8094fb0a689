"""Exceptions for the text conversion system.

This module defines exceptions raised during text conversion operations.
Every failure aborts the conversion that raised it; a container conversion
never returns a partially converted result.
"""

from typing import Any

from typedtext.utils.types.names import type_name


class ConversionError(ValueError):
    """Base exception for text conversion failures.

    Attributes:
        source: The value that failed to convert.
        source_type: The type of the source value.
        target_type: The type we attempted to convert to.
        message: Human-readable description of the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        source: Any = None,
        source_type: type | None = None,
        target_type: Any = None,
    ) -> None:
        self.source = source
        self.source_type = source_type or (type(source) if source is not None else None)
        self.target_type = target_type
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnsupportedTypeError(ConversionError):
    """Raised when the shape of a target type descriptor cannot be handled.

    Examples are parameterized types with an unknown origin (``Union[int, str]``,
    ``Literal["a"]``) and collection types with no known concrete shape.
    """

    def __init__(self, target_type: Any, message: str | None = None) -> None:
        if message is None:
            message = f"Not supported type: {type_name(target_type)}"
        super().__init__(message, target_type=target_type)


class TypeMismatchError(ConversionError):
    """Raised when a non-text value is incompatible with the target type."""

    def __init__(
        self,
        source: Any,
        target_type: Any,
        name: str | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = (
                f"Expected type '{type_name(target_type)}' for '{name}'. "
                f"Found '{type_name(type(source))}'"
            )
        super().__init__(message, source=source, target_type=target_type)


class NoConversionStrategyError(ConversionError):
    """Raised when no construction strategy and no editor exist for a type."""

    def __init__(
        self,
        source: Any,
        target_type: Any,
        name: str | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = (
                f"No conversion strategy found for type '{type_name(target_type)}', "
                f"field name '{name}'"
            )
        super().__init__(message, source=source, target_type=target_type)


class ConstructionError(ConversionError):
    """Raised when a matching strategy was found but failed while constructing.

    The underlying exception is chained as ``__cause__`` by the raiser.
    """

    def __init__(
        self,
        source: str,
        target_type: Any,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"Cannot convert string '{source}' to {type_name(target_type)}."
        super().__init__(message, source=source, target_type=target_type)
