import collections
import collections.abc
from decimal import Decimal
from typing import Mapping

import pytest

from typedtext.containers import SortedDict
from typedtext.conversion.exceptions import (
    ConstructionError,
    ConversionError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from typedtext.conversion.mappings import MappingConverterFactory
from typedtext.converter import TypeConverter

from tests.conversion.sample_types import Checksum, Color


@pytest.mark.parametrize(
    "target_tp",
    [dict, dict[str, int], Mapping[str, str], SortedDict[str, int], collections.OrderedDict],
)
def test_mapping_factory_matches_mapping_types(target_tp) -> None:
    assert MappingConverterFactory().matches(target_tp)


@pytest.mark.parametrize("target_tp", [list, set[str], str, int])
def test_mapping_factory_does_not_match_non_mappings(target_tp) -> None:
    assert not MappingConverterFactory().matches(target_tp)


@pytest.mark.parametrize(
    ("target_tp", "text", "expected", "expected_type"),
    [
        (dict[str, int], "x=1\ny=2", {"x": 1, "y": 2}, dict),
        (dict, "a=b\nc=d", {"a": "b", "c": "d"}, dict),
        (Mapping[str, str], "a: b", {"a": "b"}, dict),
        (collections.abc.MutableMapping[str, int], "n 3", {"n": 3}, dict),
        (collections.OrderedDict[str, str], "b=1\na=2", {"b": "1", "a": "2"}, collections.OrderedDict),
        (dict[Color, Decimal], "red=1.5\nBLUE=2", {Color.RED: Decimal("1.5"), Color.BLUE: 2}, dict),
        (dict[str, list[int]], "ports=80, 443", {"ports": [80, 443]}, dict),
        (dict[str, Checksum], "a=ff", {"a": Checksum(digest="ff")}, dict),
        (dict[str, int], "", {}, dict),
        (dict[str, str], "# only a comment\n\n", {}, dict),
        (dict[str, str], "flag", {"flag": ""}, dict),
    ],
)
def test_text_is_parsed_and_entries_converted(
    converter: TypeConverter, target_tp, text, expected, expected_type
) -> None:
    actual = converter.convert(text, target_tp, "entries")

    assert actual == expected
    assert type(actual) is expected_type


def test_sorted_dict_orders_keys(converter: TypeConverter) -> None:
    actual = converter.convert("b=2\nc=3\na=1", SortedDict[str, int], "entries")

    assert isinstance(actual, SortedDict)
    assert list(actual.items()) == [("a", 1), ("b", 2), ("c", 3)]


def test_sorted_dict_orders_converted_keys(converter: TypeConverter) -> None:
    actual = converter.convert("10=a\n9=b", SortedDict[int, str], "entries")
    assert list(actual) == [9, 10]


def test_later_duplicate_keys_overwrite_earlier(converter: TypeConverter) -> None:
    assert converter.convert("a=1\na=2", dict[str, int], "entries") == {"a": 2}


def test_keys_equal_after_conversion_overwrite(converter: TypeConverter) -> None:
    assert converter.convert("01=a\n1=b", dict[int, str], "entries") == {1: "b"}


def test_value_failure_aborts_conversion(converter: TypeConverter) -> None:
    with pytest.raises(ConstructionError, match="'two'"):
        converter.convert("a=1\nb=two", dict[str, int], "entries")


def test_malformed_escape_raises_conversion_error(converter: TypeConverter) -> None:
    with pytest.raises(ConversionError, match="Malformed"):
        converter.convert("a=\\u12", dict[str, str], "entries")


def test_sorted_dict_of_unorderable_keys_fails(converter: TypeConverter) -> None:
    with pytest.raises(ConversionError, match="SortedDict"):
        converter.convert("red=1\ngreen=2", SortedDict[Color, int], "entries")


@pytest.mark.parametrize(
    "target_tp",
    [collections.defaultdict[str, int], collections.Counter[str]],
)
def test_unsupported_mapping_types_are_named(converter: TypeConverter, target_tp) -> None:
    with pytest.raises(UnsupportedTypeError, match="map type not supported"):
        converter.convert("a=1", target_tp, "entries")


def test_unsupported_value_type_names_full_type(converter: TypeConverter) -> None:
    with pytest.raises(UnsupportedTypeError, match=r"dict\[str, int \| str\]"):
        converter.convert("a=1", dict[str, int | str], "entries")


def test_mapping_values_are_returned_unchanged(converter: TypeConverter) -> None:
    values = {"a": 1}
    assert converter.convert(values, dict[str, int], "entries") is values


def test_non_text_values_are_rejected(converter: TypeConverter) -> None:
    with pytest.raises(TypeMismatchError):
        converter.convert(["a=1"], dict[str, int], "entries")
