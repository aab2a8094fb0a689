"""Construction strategies that build a scalar value from text.

Strategies are tried in a fixed order and the first one that applies wins:

    1. Enumerations: member name lookup, exact, then upper-cased, then lower-cased
    2. String constructor: the type's constructor called with the text
    3. Static factory: a public static/class method taking one ``str`` and
       returning the type

A strategy that doesn't apply to the target type raises ``NotApplicable``,
which moves on to the next one. A strategy that applies but fails raises
``ConstructionError`` with the original exception as its cause.
"""

import inspect
import typing
from collections.abc import Callable, Iterator, Mapping
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from logging import getLogger
from types import MappingProxyType, UnionType
from typing import Any, get_args, get_origin, get_type_hints

import typing_extensions

from typedtext.conversion.exceptions import ConstructionError
from typedtext.utils.types.boxing import box
from typedtext.utils.types.names import type_name

logger = getLogger(__name__)


class NotApplicable(Exception):
    """Raised when a strategy can't be used for the target type."""


def _parse_bool(text: str) -> bool:
    return text.lower() == "true"


#: Builtin types mapped to the callable that parses text into them. Their
#: constructors can't be inspected reliably, so they're registered explicitly.
STRING_CONSTRUCTORS: Mapping[type, Callable[[str], Any]] = MappingProxyType(
    {
        str: str,
        int: int,
        float: float,
        complex: complex,
        bool: _parse_bool,
        bytes: str.encode,
        bytearray: lambda text: bytearray(text, "utf-8"),
        Decimal: Decimal,
        Fraction: Fraction,
    }
)

#: Builtin bases whose constructor accepts text, for subclasses like ``class Port(int)``.
_TEXT_CONSTRUCTIBLE_BASES = (str, int, float, complex, Decimal, Fraction)

_SELF_TYPES = (typing.Self, typing_extensions.Self)


def from_enum(tp: type, text: str) -> Any:
    if not issubclass(tp, Enum):
        raise NotApplicable
    error: KeyError | None = None
    for candidate in (text, text.upper(), text.lower()):
        try:
            return tp[candidate]
        except KeyError as e:
            error = e
    raise ConstructionError(
        text, tp, message=f"No enum constant {type_name(tp)}.{text}"
    ) from error


def _has_python_initializer(tp: type) -> bool:
    for klass in tp.__mro__[:-1]:
        for attr in ("__new__", "__init__"):
            member = vars(klass).get(attr)
            if isinstance(member, (staticmethod, classmethod)):
                member = member.__func__
            if inspect.isfunction(member):
                return True
    return False


def _parameter_annotation(tp: type, parameter_name: str) -> Any:
    for attr in ("__init__", "__new__"):
        try:
            hints = get_type_hints(getattr(tp, attr))
        except (AttributeError, NameError, TypeError):
            continue
        if parameter_name in hints:
            return hints[parameter_name]
    return inspect.signature(tp).parameters[parameter_name].annotation


def _accepts_text(tp: type, parameter_name: str) -> bool:
    """Check that the constructor parameter receiving the text takes a string.

    Unannotated parameters, ``Any``, ``object`` and unions including ``str`` count.
    """
    annotation = _parameter_annotation(tp, parameter_name)
    if annotation is inspect.Parameter.empty or annotation == "str":
        return True
    annotation = box(annotation)
    if annotation is str or annotation is object:
        return True
    return get_origin(annotation) in (typing.Union, UnionType) and str in get_args(annotation)


def _string_constructor(tp: type) -> Callable[[str], Any]:
    if tp in STRING_CONSTRUCTORS:
        return STRING_CONSTRUCTORS[tp]
    if not _has_python_initializer(tp):
        if issubclass(tp, _TEXT_CONSTRUCTIBLE_BASES):
            return tp
        raise NotApplicable
    try:
        bound = inspect.signature(tp).bind("")
    except (TypeError, ValueError):
        raise NotApplicable from None
    (parameter_name,) = bound.arguments
    if not _accepts_text(tp, parameter_name):
        raise NotApplicable
    return tp


def from_string_constructor(tp: type, text: str) -> Any:
    constructor = _string_constructor(tp)
    try:
        return constructor(text)
    except Exception as e:
        raise ConstructionError(text, tp) from e


def _returns_target(hints: dict[str, Any], tp: type) -> bool:
    returns = hints.get("return")
    return returns is tp or any(returns is self_tp for self_tp in _SELF_TYPES)


def _factory_methods(tp: type) -> Iterator[Callable[[str], Any]]:
    """Yield the public static and class methods of ``tp`` that build it from a string.

    Methods are visited in name order, so the choice is stable when a type has
    more than one candidate.
    """
    for attr_name in sorted(dir(tp)):
        if attr_name.startswith("_"):
            continue
        member = inspect.getattr_static(tp, attr_name)
        if not isinstance(member, (staticmethod, classmethod)):
            continue
        method = getattr(tp, attr_name)
        try:
            hints = get_type_hints(method)
            parameters = list(inspect.signature(method).parameters.values())
        except (AttributeError, NameError, TypeError, ValueError):
            continue
        if len(parameters) != 1 or hints.get(parameters[0].name) is not str:
            continue
        if _returns_target(hints, tp):
            yield method


def from_static_factory(tp: type, text: str) -> Any:
    method = next(_factory_methods(tp), None)
    if method is None:
        raise NotApplicable
    try:
        return method(text)
    except Exception as e:
        raise ConstructionError(text, tp) from e


#: Strategies in the order they're tried.
STRATEGIES: tuple[Callable[[type, str], Any], ...] = (
    from_enum,
    from_string_constructor,
    from_static_factory,
)


def create(tp: type, text: str) -> Any:
    """Build a ``tp`` from text with the first applicable strategy.

    Raises:
        NotApplicable: If no strategy applies to ``tp``.
        ConstructionError: If the applicable strategy failed.
    """
    for strategy in STRATEGIES:
        try:
            value = strategy(tp, text)
        except NotApplicable:
            continue
        logger.debug("Converted %r to %s with %s", text, type_name(tp), strategy.__name__)
        return value
    raise NotApplicable
