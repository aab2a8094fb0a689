"""Type conversion registry and protocols.

This module defines the core abstractions for typedtext's conversion system.
A registry of converter factories resolves, for a target type descriptor, a
converter that turns text (or an already-typed value) into that type.

Key concepts:
    - Converter: Converts a raw value into one target type
    - ConverterFactory: Creates converters for the target types it recognises
    - ConverterRegistry: Resolves the appropriate converter for a target type

The registry is queried in order, returning the first matching converter.
Factories recursively query the registry to handle nested types (e.g.
list[Color] needs a converter for Color).
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

_O = TypeVar("_O", covariant=True)


@runtime_checkable
class Converter(Protocol[_O]):
    def matches(self, target_tp: Any) -> bool:
        """Check if this converter can produce the given target type.

        Args:
            target_tp: The target type descriptor.

        Returns:
            True if this converter can convert into target_tp.
        """
        ...

    def convert(self, source: Any, name: str | None = None) -> _O:
        """Convert a raw value into the target type.

        Args:
            source: The value to convert, usually a string.
            name: Name of the field being converted, used in error messages.

        Returns:
            The converted value.
        """
        ...


@runtime_checkable
class ConverterFactory(Protocol[_O]):
    def matches(self, target_tp: Any) -> bool:
        """Check if this factory can create a converter for the given target type.

        Args:
            target_tp: The target type descriptor.

        Returns:
            True if this factory handles target_tp.
        """
        ...

    def converter(self, target_tp: Any, registry: "ConverterRegistry") -> Converter[_O] | None:
        """Create a converter for the given target type.

        Args:
            target_tp: The target type descriptor.
            registry: The converter registry for resolving nested types.

        Returns:
            A Converter for target_tp, or None if a nested type is unsupported.
        """
        ...


#: A registry entry can be either a direct Converter or a ConverterFactory
ConverterRegistryEntry = ConverterFactory[Any] | Converter[Any]


class ConverterRegistry:
    """Registry that resolves converters for target types.

    The registry holds a sequence of converters and factories. When resolving
    a target type, it queries each entry in order and returns the first one
    that matches and successfully produces a converter.

    The registry is immutable once built, so it can be shared between threads.

    Attributes:
        _converters: Ordered sequence of converters and factories to query.
    """

    def __init__(self, *converters: ConverterRegistryEntry) -> None:
        self._converters = converters

    def resolve(self, target_tp: Any) -> Converter[Any] | None:
        """Find a converter for the given target type.

        Args:
            target_tp: The target type descriptor.

        Returns:
            A Converter if one is found, None otherwise.
        """
        return next(
            (
                converter
                for entry in self._converters
                if entry.matches(target_tp)
                and (
                    converter := (
                        entry
                        if isinstance(entry, Converter)
                        else entry.converter(target_tp, self)
                    )
                )
            ),
            None,
        )

    def __iter__(self):
        return iter(self._converters)
