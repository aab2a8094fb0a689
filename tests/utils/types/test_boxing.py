from typing import Annotated, Any, NewType, Optional, Union

import pytest

from typedtext.utils.types.boxing import box, is_numeric

Celsius = NewType("Celsius", float)
Reading = NewType("Reading", Celsius)


@pytest.mark.parametrize(
    ("tp", "expected"),
    [
        (int, int),
        (Any, object),
        (Optional[int], int),
        (int | None, int),
        (None | str, str),
        (Annotated[int, "meta"], int),
        (Optional[Annotated[bool, "flag"]], bool),
        (Celsius, float),
        (Reading, float),
        (list[int], list[int]),
    ],
)
def test_box_strips_wrappers(tp, expected) -> None:
    assert box(tp) == expected


@pytest.mark.parametrize("tp", [Union[int, str], int | str | None])
def test_box_leaves_real_unions(tp) -> None:
    assert box(tp) is tp


@pytest.mark.parametrize(
    ("tp", "expected"),
    [
        (int, True),
        (float, True),
        (complex, True),
        (bool, False),
        (str, False),
        (list[int], False),
    ],
)
def test_is_numeric(tp, expected) -> None:
    assert is_numeric(tp) is expected
