"""Utilities for naming type descriptors and resolving them from text."""

from __future__ import annotations

import importlib
import re
import typing
from typing import Any, get_type_hints

_DOTTED_NAME = re.compile(r"\b[A-Za-z_]\w*(?:\.[A-Za-z_]\w*)+")


def type_name(tp: Any) -> str:
    """Return a readable name for a type descriptor.

    Classes are named by their qualified name, prefixed with their module unless
    they are builtins. Anything else (generic aliases, unions) uses its repr.
    """
    if isinstance(tp, type) and not typing.get_args(tp):
        if tp.__module__ == "builtins":
            return tp.__qualname__
        return f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def _import_dotted_prefix(dotted: str) -> tuple[str, Any] | None:
    parts = dotted.split(".")
    for end in range(len(parts) - 1, 0, -1):
        try:
            importlib.import_module(".".join(parts[:end]))
        except ImportError:
            continue
        return parts[0], importlib.import_module(parts[0])
    return None


def resolve_type_expression(expression: str) -> Any:
    """Evaluate a textual type expression such as ``dict[str, myapp.Level]``.

    Builtin names, everything exported by ``typing`` and the sorted container
    types are available directly. Dotted names are imported: the longest
    importable module prefix is imported and its top-level package bound in
    the evaluation namespace.

    Args:
        expression: The type expression to evaluate.

    Returns:
        The type descriptor the expression denotes.

    Raises:
        NameError: If a name in the expression can't be resolved.
        SyntaxError: If the expression isn't a valid type expression.

    Example::

        resolve_type_expression("SortedSet[int]")  # SortedSet[int]
        resolve_type_expression("list[decimal.Decimal]")  # list[Decimal]
    """
    from typedtext.containers import SortedDict, SortedSet

    namespace: dict[str, Any] = {name: getattr(typing, name) for name in typing.__all__}
    namespace.update(SortedSet=SortedSet, SortedDict=SortedDict)
    for dotted in _DOTTED_NAME.findall(expression):
        imported = _import_dotted_prefix(dotted)
        if imported is not None:
            top_name, module = imported
            namespace[top_name] = module

    # get_type_hints() evaluates the string annotation in the given namespace.
    temp = type("_TypeExpressionResolver", (), {"__annotations__": {"_": expression}})
    hints = get_type_hints(temp, globalns=namespace, localns={}, include_extras=True)
    return hints["_"]
