from typing import Any, TypeVar, get_args, get_origin


def _get_type_params_for_base(tp: Any, base: type) -> tuple[Any, ...] | None:
    """Internal implementation of get_type_params_for_base."""
    origin = get_origin(tp) or tp
    args = get_args(tp) or ()

    if origin is base:
        return args

    params = getattr(origin, "__parameters__", ())
    substitutions = dict(zip(params, args, strict=True)) if args else {}

    for orig_base in getattr(origin, "__orig_bases__", ()):
        base_origin = get_origin(orig_base) or orig_base
        base_args = get_args(orig_base)
        resolved_base_args = tuple(substitutions.get(arg, arg) for arg in base_args)
        resolved_base = base_origin[resolved_base_args] if resolved_base_args else base_origin
        base_resolution = _get_type_params_for_base(resolved_base, base)
        if base_resolution is not None:
            return base_resolution

    return None


def get_type_params_for_base(tp: Any, base: type) -> tuple[Any, ...]:
    """Extract type parameters for a base type from a parameterized type.

    Given a potentially parameterized type and a base type, return the type
    parameters for the base type as seen from the parameterized type.

    Args:
        tp: A potentially parameterized type (e.g., list[int], Tags).
        base: The base type to extract parameters for (e.g., list, dict).

    Returns:
        A tuple of type parameters for the base type. Empty if the base is
        reached without parameters or isn't among the generic bases of tp.

    Examples:
        >>> get_type_params_for_base(list[int], list)
        (<class 'int'>,)

        >>> class Tags(list[str]): ...
        >>> get_type_params_for_base(Tags, list)
        (<class 'str'>,)
    """
    return _get_type_params_for_base(tp, base) or ()


def type_params(tp: Any, base: type, count: int) -> tuple[Any, ...]:
    """Return exactly ``count`` type parameters of ``tp`` for ``base``.

    Missing parameters and unbound type variables default to ``str``, the type
    of the raw text being converted.

    Examples:
        >>> type_params(dict, dict, 2)
        (<class 'str'>, <class 'str'>)

        >>> type_params(list[int], list, 1)
        (<class 'int'>,)
    """
    params = get_type_params_for_base(tp, base)[:count]
    padded = (*params, *(str,) * (count - len(params)))
    return tuple(str if isinstance(param, TypeVar) else param for param in padded)
