"""Converter for scalar (non-container) target types.

``ValueFactory`` converts a single value into a simple target type:

    1. The target is boxed (``Optional[int]`` -> ``int``, ``Any`` -> ``object``)
    2. ``None`` becomes ``False`` for ``bool`` targets and ``None`` otherwise
    3. Values already of the target type are returned unchanged
    4. Numbers are returned unchanged for numeric targets, without coercion
    5. Other non-text values are a type mismatch
    6. Text is run through the construction strategies, then the registered
       editor for the target type

Construction strategies take precedence over editors: an editor is only
consulted when no strategy applies to the target type.
"""

import importlib
from logging import getLogger
from typing import Any, get_origin

from typedtext.conversion import strategies
from typedtext.conversion.editors import EditorRegistry, default_editors
from typedtext.conversion.exceptions import (
    ConstructionError,
    ConversionError,
    NoConversionStrategyError,
    TypeMismatchError,
)
from typedtext.conversion.registry import Converter, ConverterFactory, ConverterRegistry
from typedtext.utils.types.boxing import box, is_numeric
from typedtext.utils.types.names import type_name

logger = getLogger(__name__)


def _initialize(tp: type) -> None:
    """Import the module defining ``tp`` so registrations made at import time exist."""
    try:
        importlib.import_module(tp.__module__)
    except ImportError as e:
        logger.debug("Could not initialize module of %s: %s", type_name(tp), e)


class ValueFactory:
    """Builds scalar values from text.

    Attributes:
        _editors: Editors consulted when no construction strategy applies.
    """

    def __init__(self, editors: EditorRegistry = default_editors) -> None:
        self._editors = editors

    def convert(self, value: Any, target_tp: Any, name: str | None = None) -> Any:
        """Convert ``value`` into ``target_tp``.

        Args:
            value: The value to convert, usually a string.
            target_tp: A simple (non-parameterized) target type.
            name: Name of the field being converted, used in error messages.

        Returns:
            The converted value.

        Raises:
            TypeMismatchError: If value is neither text nor compatible with target_tp.
            NoConversionStrategyError: If nothing can build target_tp from text.
            ConstructionError: If building target_tp from the text failed.
        """
        target_tp = box(target_tp)

        if value is None:
            return False if target_tp is bool else None

        if isinstance(value, target_tp):
            return value

        if is_numeric(type(value)) and is_numeric(target_tp):
            return value

        if not isinstance(value, str):
            raise TypeMismatchError(value, target_tp, name)

        _initialize(target_tp)

        try:
            return strategies.create(target_tp, value)
        except strategies.NotApplicable:
            pass

        editor = self._editors.get(target_tp)
        if editor is None:
            raise NoConversionStrategyError(value, target_tp, name)

        try:
            editor.set_as_text(value)
            return editor.get_value()
        except ConversionError:
            raise
        except Exception as e:
            raise ConstructionError(value, target_tp) from e


class ScalarConverter(Converter[Any]):
    """Converter that delegates to a ``ValueFactory`` for one target type.

    Attributes:
        _target_tp: The boxed target type.
        _factory: The factory building values.
    """

    def __init__(self, target_tp: Any, factory: ValueFactory) -> None:
        self._target_tp = target_tp
        self._factory = factory

    def matches(self, target_tp: Any) -> bool:
        return box(target_tp) is self._target_tp

    def convert(self, source: Any, name: str | None = None) -> Any:
        return self._factory.convert(source, self._target_tp, name)


class ScalarConverterFactory(ConverterFactory[Any]):
    """Factory that creates converters for simple target types.

    Matches any descriptor that boxes to a class. It's registered last in the
    default registry, after the container factories.
    """

    def __init__(self, editors: EditorRegistry = default_editors) -> None:
        self._factory = ValueFactory(editors)

    def matches(self, target_tp: Any) -> bool:
        boxed = box(target_tp)
        return isinstance(boxed, type) and get_origin(boxed) is None

    def converter(self, target_tp: Any, registry: ConverterRegistry) -> Converter[Any] | None:
        return ScalarConverter(box(target_tp), self._factory)
