import numbers
import typing
from types import NoneType, UnionType
from typing import Any, get_args, get_origin


def box(tp: Any) -> Any:
    """Normalize a type descriptor to the runtime class used for matching.

    Strips wrappers that don't change the runtime type of a converted value:
    ``Annotated[T, ...]`` and ``Optional[T]`` become ``T``, a ``NewType``
    becomes its supertype and ``Any`` becomes ``object``.

    Args:
        tp: The type to normalize.

    Returns:
        The normalized type. Types that aren't wrapped are returned unchanged.
    """
    if tp is Any:
        return object
    if hasattr(tp, "__supertype__"):
        return box(tp.__supertype__)

    match get_origin(tp), get_args(tp):
        case typing.Annotated, (wrapped_tp, *_):
            return box(wrapped_tp)
        case origin, (first, second) if origin in (typing.Union, UnionType) and NoneType in (
            first,
            second,
        ):
            return box(second if first is NoneType else first)
        case _:
            return tp


def is_numeric(tp: Any) -> bool:
    """Check whether values of ``tp`` are numbers for pass-through purposes.

    ``bool`` is an ``int`` subclass but is never treated as numeric.
    """
    return isinstance(tp, type) and issubclass(tp, numbers.Number) and not issubclass(tp, bool)
