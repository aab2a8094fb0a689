"""Registry of per-type editors, the last strategy tried for scalar targets.

An editor is a stateful "set text, get value" handler. The registry stores
editor *factories* rather than editors, so every conversion gets its own
editor and conversions can run concurrently.

The registry is populated once and then frozen; ``default_editors`` is frozen
at import time. Build a new ``EditorRegistry`` to add editors for your own
types, freeze it, and pass it to ``ScalarConverterFactory``.
"""

import datetime
from collections.abc import Callable, Iterator
from typing import Any, Protocol, runtime_checkable

from pydantic import TypeAdapter


@runtime_checkable
class Editor(Protocol):
    def set_as_text(self, text: str) -> None:
        """Parse text into the editor's value."""
        ...

    def get_value(self) -> Any:
        """Return the value parsed by the last ``set_as_text`` call."""
        ...


#: Zero-argument callable producing a fresh editor.
EditorFactory = Callable[[], Editor]


class FunctionEditor(Editor):
    """Editor that parses text with a plain function.

    Example::

        registry.register(Color, lambda: FunctionEditor(Color.from_hex))
    """

    def __init__(self, fn: Callable[[str], Any]) -> None:
        self._fn = fn
        self._value: Any = None

    def set_as_text(self, text: str) -> None:
        self._value = self._fn(text)

    def get_value(self) -> Any:
        return self._value


class TypeAdapterEditor(FunctionEditor):
    """Editor that parses text with pydantic's string validation.

    Accepts what pydantic accepts for a string input, e.g. ISO 8601 dates,
    times and durations (``"P1DT2H"``).
    """

    def __init__(self, adapter: TypeAdapter[Any]) -> None:
        super().__init__(adapter.validate_strings)


class EditorRegistry:
    """Mapping from a class to the factory of its editor.

    Lookups match the class exactly; an editor registered for a base class
    doesn't apply to its subclasses.
    """

    def __init__(self, editors: dict[type, EditorFactory] | None = None) -> None:
        self._editors: dict[type, EditorFactory] = dict(editors or {})
        self._frozen = False

    def register(self, tp: type, factory: EditorFactory) -> None:
        """Register the editor factory for ``tp``, replacing any previous one.

        Raises:
            RuntimeError: If the registry has been frozen.
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register an editor for {tp!r}: registry is frozen")
        self._editors[tp] = factory

    def freeze(self) -> "EditorRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, tp: type) -> Editor | None:
        """Return a new editor for ``tp``, or None if none is registered."""
        factory = self._editors.get(tp)
        return factory() if factory is not None else None

    def __contains__(self, tp: object) -> bool:
        return tp in self._editors

    def __iter__(self) -> Iterator[type]:
        return iter(self._editors)

    def __len__(self) -> int:
        return len(self._editors)


def _type_adapter_editor(tp: type) -> EditorFactory:
    adapter = TypeAdapter(tp)
    return lambda: TypeAdapterEditor(adapter)


default_editors = EditorRegistry(
    {
        tp: _type_adapter_editor(tp)
        for tp in (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)
    }
).freeze()
