"""Converter for collection types (list, set, frozenset, tuple, SortedSet).

Text is split on commas, with whitespace around each comma trimmed, and every
element is converted with the converter the registry resolves for the element
type. Commas inside elements can't be escaped.

Supported collection types:
    - list, and the abstract Iterable, Collection, Sequence and MutableSequence
      (built as list)
    - set, and the abstract Set and MutableSet (built as set)
    - frozenset
    - tuple[T, ...]
    - SortedSet
    - subclasses of the concrete types above, built with their own constructor

Example:
    Converting "1, 2,3" to list[int] gives [1, 2, 3]; converting "b,a,a" to
    SortedSet[str] gives SortedSet(['a', 'b']).
"""

import collections.abc
import re
from typing import Any, get_origin

from typedtext.containers import SortedSet
from typedtext.conversion.exceptions import (
    ConversionError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from typedtext.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from typedtext.utils.types.boxing import box
from typedtext.utils.types.names import type_name
from typedtext.utils.types.params import get_type_params_for_base, type_params

#: Separator between elements, swallowing surrounding whitespace
SEPARATOR = re.compile(r"\s*,\s*")

#: Abstract collection types mapped to the concrete type built for them
ABSTRACT_SEQUENCE_TYPES: dict[Any, type] = {
    collections.abc.Iterable: list,
    collections.abc.Collection: list,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Set: set,
    collections.abc.MutableSet: set,
}

#: Concrete collection types; subclasses are built with their own constructor
CONCRETE_SEQUENCE_TYPES = (SortedSet, frozenset, set, list, tuple)

_TEXT_TYPES = (str, bytes, bytearray)


def split_elements(text: str) -> list[str]:
    """Split comma-separated text into its elements.

    Trailing empty elements are dropped. Text without any comma, including the
    empty string, is a single element.

    Examples:
        >>> split_elements("a , b,c")
        ['a', 'b', 'c']

        >>> split_elements("a,b,,")
        ['a', 'b']
    """
    elements = SEPARATOR.split(text)
    if len(elements) > 1:
        while elements and not elements[-1]:
            elements.pop()
    return elements


def _collection_origin(tp: Any) -> type | None:
    """Return the collection class of ``tp``, or None if it isn't a collection type.

    Bare classes only count when they are one of the known collection types
    (or subclass one), so iterable scalars such as flag enums stay scalars.
    Parameterized iterables always count, so unsupported ones are reported.
    """
    origin = get_origin(tp) or tp
    if not isinstance(origin, type) or issubclass(
        origin, (*_TEXT_TYPES, collections.abc.Mapping)
    ):
        return None
    if origin in ABSTRACT_SEQUENCE_TYPES or issubclass(origin, CONCRETE_SEQUENCE_TYPES):
        return origin
    if get_origin(tp) is not None and issubclass(origin, collections.abc.Iterable):
        return origin
    return None


def _tuple_element_type(tp: Any) -> Any:
    match get_type_params_for_base(tp, tuple):
        case ():
            return str
        case (element_tp, marker) if marker is Ellipsis:
            return element_tp
        case _:
            raise UnsupportedTypeError(
                tp, f"{type_name(tp)} collection type not supported: only tuple[T, ...] is"
            )


def _resolve_shape(tp: Any, origin: type) -> tuple[type, Any]:
    """Return the type to build and the element type for a collection descriptor.

    Raises:
        UnsupportedTypeError: If the collection type has no known concrete shape.
    """
    if origin in ABSTRACT_SEQUENCE_TYPES:
        return ABSTRACT_SEQUENCE_TYPES[origin], type_params(tp, origin, 1)[0]
    for base in CONCRETE_SEQUENCE_TYPES:
        if issubclass(origin, base):
            if base is tuple:
                return origin, _tuple_element_type(tp)
            return origin, type_params(tp, base, 1)[0]
    raise UnsupportedTypeError(tp, f"{type_name(tp)} collection type not supported")


class SequenceConverter(Converter[Any]):
    """Converter that splits text and converts each element.

    Attributes:
        _target: The collection type to construct.
        _inner: Converter for transforming individual elements.
    """

    def __init__(self, target: type, inner: Converter[Any]) -> None:
        self._target = target
        self._inner = inner

    def matches(self, target_tp: Any) -> bool:
        return True

    def convert(self, source: Any, name: str | None = None) -> Any:
        if source is None or isinstance(source, self._target):
            return source
        if not isinstance(source, str):
            raise TypeMismatchError(source, self._target, name)

        elements = [self._inner.convert(it, name) for it in split_elements(source)]
        try:
            return self._target(elements)
        except TypeError as e:
            raise ConversionError(
                f"Cannot collect elements of '{name}' into {type_name(self._target)}: {e}",
                source=source,
                target_type=self._target,
            ) from e


class SequenceConverterFactory(ConverterFactory[Any]):
    """Factory that creates converters for collection target types.

    Matches every iterable type except text and mappings, so unsupported
    collection types fail with an error naming them. Resolves a converter for
    the element type through the registry, allowing nested type conversions.
    """

    def matches(self, target_tp: Any) -> bool:
        return _collection_origin(box(target_tp)) is not None

    def converter(self, target_tp: Any, registry: ConverterRegistry) -> Converter[Any] | None:
        target_tp = box(target_tp)
        origin = _collection_origin(target_tp)
        if origin is None:
            raise UnsupportedTypeError(target_tp)

        target, element_tp = _resolve_shape(target_tp, origin)
        inner_converter = registry.resolve(element_tp)
        return SequenceConverter(target, inner_converter) if inner_converter is not None else None
