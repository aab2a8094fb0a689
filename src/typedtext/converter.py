"""Entry point converting text into values of a target type descriptor.

Example::

    converter = TypeConverter()
    converter.convert("1, 2, 3", list[int], "ports")  # [1, 2, 3]
    converter.convert("x=1\\ny=2", dict[str, int])  # {"x": 1, "y": 2}
    converter.convert("red", Color)  # Color.RED
"""

from typing import Any

from typedtext.conversion import default_registry
from typedtext.conversion.exceptions import UnsupportedTypeError
from typedtext.conversion.registry import ConverterRegistry


class TypeConverter:
    """Converts raw values into the type described by a type annotation.

    Dispatches on the shape of the descriptor: mappings and collections are
    parsed and their elements converted recursively, simple types go through
    the scalar construction strategies.

    Attributes:
        _registry: Registry resolving a converter for each target type.
    """

    def __init__(self, registry: ConverterRegistry = default_registry) -> None:
        self._registry = registry

    def convert(self, value: Any, target_tp: Any, name: str | None = None) -> Any:
        """Convert ``value`` into ``target_tp``.

        Args:
            value: The value to convert, usually a string.
            target_tp: The target type descriptor, e.g. ``int`` or ``dict[str, Level]``.
            name: Name of the field being converted, used in error messages.

        Returns:
            The converted value.

        Raises:
            UnsupportedTypeError: If no converter handles target_tp.
            ConversionError: If the value can't be converted.
        """
        converter = self._registry.resolve(target_tp)
        if converter is None:
            raise UnsupportedTypeError(target_tp)
        return converter.convert(value, name)


_default_converter = TypeConverter()


def convert(value: Any, target_tp: Any, name: str | None = None) -> Any:
    """Convert ``value`` into ``target_tp`` using the default registry."""
    return _default_converter.convert(value, target_tp, name)
