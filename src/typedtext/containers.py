"""Key-ordered container types produced for sorted targets.

``SortedSet`` and ``SortedDict`` are both usable as target type descriptors,
e.g. ``SortedSet[int]`` or ``SortedDict[str, Level]``. They are the only
container shapes that need their elements (or keys) to be totally ordered.
"""

from collections.abc import Iterable, Iterator, Set
from operator import itemgetter
from typing import Any, Generic, TypeVar

_T = TypeVar("_T")
_K = TypeVar("_K")
_V = TypeVar("_V")


class SortedSet(Set, Generic[_T]):
    """Immutable set that iterates its members in ascending order.

    Example::

        SortedSet(["b", "a", "a"])  # SortedSet(['a', 'b'])
    """

    __slots__ = ("_members", "_items")

    def __init__(self, iterable: Iterable[_T] = ()) -> None:
        self._members = frozenset(iterable)
        self._items = tuple(sorted(self._members))  # type: ignore[type-var]

    def __contains__(self, value: object) -> bool:
        return value in self._members

    def __iter__(self) -> Iterator[_T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> _T:
        return self._items[index]

    def __hash__(self) -> int:
        return self._hash()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class SortedDict(dict[_K, _V]):
    """Dict that keeps its keys in ascending order.

    Inserting a key that sorts before the current last key reorders the
    dict. Overwriting an existing key keeps its position.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(sorted(dict(*args, **kwargs).items(), key=itemgetter(0)))

    def __setitem__(self, key: _K, value: _V) -> None:
        if key in self or not self or next(reversed(self)) < key:  # type: ignore[operator]
            super().__setitem__(key, value)
            return
        items = sorted([*self.items(), (key, value)], key=itemgetter(0))
        super().clear()
        super().update(items)

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        for key, value in dict(*args, **kwargs).items():
            self[key] = value

    def setdefault(self, key: _K, default: Any = None) -> Any:  # type: ignore[override]
        if key not in self:
            self[key] = default
        return self[key]

    def copy(self) -> "SortedDict[_K, _V]":
        return type(self)(self)

    def __or__(self, other: Any) -> "SortedDict[_K, _V]":  # type: ignore[override]
        merged = self.copy()
        merged.update(other)
        return merged

    def __ior__(self, other: Any) -> "SortedDict[_K, _V]":  # type: ignore[override]
        self.update(other)
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self)!r})"
