from typing import Any

from typedtext.conversion import default_registry
from typedtext.conversion.mappings import MappingConverterFactory
from typedtext.conversion.registry import Converter, ConverterRegistry
from typedtext.conversion.scalars import ScalarConverter, ScalarConverterFactory
from typedtext.conversion.sequences import SequenceConverter, SequenceConverterFactory


def test_registry_returns_none_when_no_match() -> None:
    registry = ConverterRegistry()
    assert registry.resolve(int) is None


def test_registry_returns_first_matching_converter() -> None:
    class AlwaysMatchConverter(Converter[Any]):
        def __init__(self, result: Any) -> None:
            self._result = result

        def matches(self, target_tp: Any) -> bool:
            return True

        def convert(self, source: Any, name: str | None = None) -> Any:
            return self._result

    first_converter = AlwaysMatchConverter("first")
    second_converter = AlwaysMatchConverter("second")

    registry = ConverterRegistry(first_converter, second_converter)

    conv = registry.resolve(int)
    assert conv is first_converter
    assert conv.convert("42") == "first"


def test_default_registry_checks_containers_before_scalars() -> None:
    assert [type(entry) for entry in default_registry] == [
        MappingConverterFactory,
        SequenceConverterFactory,
        ScalarConverterFactory,
    ]


def test_default_registry_resolves_by_descriptor_shape() -> None:
    assert isinstance(default_registry.resolve(int), ScalarConverter)
    assert isinstance(default_registry.resolve(list[int]), SequenceConverter)
    assert isinstance(
        default_registry.resolve(dict[str, int]), MappingConverterFactory.MappingConverter
    )
    assert default_registry.resolve(int | str) is None
