"""Converter for mapping types (dict, Mapping, SortedDict).

Text is parsed as line-oriented ``key=value`` entries (the ``.properties``
format), and each key and value is converted with the converters the registry
resolves for the key and value types. Later duplicate keys overwrite earlier
ones, including keys that only become equal after conversion.

Example:
    Converting "x=1\\ny=2" to dict[str, int] gives {"x": 1, "y": 2}.
"""

import collections
import collections.abc
from typing import Any, get_origin

from typedtext.containers import SortedDict
from typedtext.conversion.exceptions import (
    ConversionError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from typedtext.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from typedtext.utils.properties import parse_properties
from typedtext.utils.types.boxing import box
from typedtext.utils.types.names import type_name
from typedtext.utils.types.params import type_params

#: Mapping types mapped to the concrete type built for them
MAPPING_TYPES: dict[Any, type] = {
    dict: dict,
    collections.abc.Mapping: dict,
    collections.abc.MutableMapping: dict,
    collections.OrderedDict: collections.OrderedDict,
    SortedDict: SortedDict,
}


def _mapping_origin(tp: Any) -> type | None:
    origin = get_origin(tp) or tp
    if isinstance(origin, type) and issubclass(origin, collections.abc.Mapping):
        return origin
    return None


class MappingConverterFactory(ConverterFactory[Any]):
    """Factory that creates converters for mapping target types.

    Resolves converters for the key and value types separately, allowing
    nested type conversions. Both default to ``str``.
    """

    class MappingConverter(Converter[Any]):
        """Converter that parses ``key=value`` text and converts keys and values.

        Attributes:
            _target: The mapping type to construct.
            _key_converter: Converter for transforming keys.
            _value_converter: Converter for transforming values.
        """

        def __init__(
            self,
            target: type,
            key_converter: Converter[Any],
            value_converter: Converter[Any],
        ) -> None:
            self._target = target
            self._key_converter = key_converter
            self._value_converter = value_converter

        def matches(self, target_tp: Any) -> bool:
            return True

        def convert(self, source: Any, name: str | None = None) -> Any:
            if source is None or isinstance(source, self._target):
                return source
            if not isinstance(source, str):
                raise TypeMismatchError(source, self._target, name)

            try:
                entries = parse_properties(source)
            except ValueError as e:
                raise ConversionError(
                    f"Malformed key/value text for '{name}': {e}",
                    source=source,
                    target_type=self._target,
                ) from e

            items = [
                (self._key_converter.convert(k, name), self._value_converter.convert(v, name))
                for k, v in entries.items()
            ]
            try:
                return self._target(items)
            except TypeError as e:
                raise ConversionError(
                    f"Cannot collect entries of '{name}' into {type_name(self._target)}: {e}",
                    source=source,
                    target_type=self._target,
                ) from e

    def matches(self, target_tp: Any) -> bool:
        return _mapping_origin(box(target_tp)) is not None

    def converter(self, target_tp: Any, registry: ConverterRegistry) -> Converter[Any] | None:
        target_tp = box(target_tp)
        origin = _mapping_origin(target_tp)
        if origin not in MAPPING_TYPES:
            raise UnsupportedTypeError(target_tp, f"{type_name(target_tp)} map type not supported")

        key_tp, value_tp = type_params(target_tp, origin, 2)
        key_converter = registry.resolve(key_tp)
        value_converter = registry.resolve(value_tp)

        return (
            self.MappingConverter(MAPPING_TYPES[origin], key_converter, value_converter)
            if key_converter and value_converter
            else None
        )
