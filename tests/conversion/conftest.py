import pytest

from typedtext.conversion.editors import EditorRegistry, FunctionEditor
from typedtext.conversion.mappings import MappingConverterFactory
from typedtext.conversion.registry import ConverterRegistry
from typedtext.conversion.scalars import ScalarConverterFactory, ValueFactory
from typedtext.conversion.sequences import SequenceConverterFactory
from typedtext.converter import TypeConverter

from tests.conversion.sample_types import Checksum, Hostname


@pytest.fixture
def editors() -> EditorRegistry:
    """Editor registry with editors for the sample types, frozen before use."""
    editors = EditorRegistry()
    editors.register(Checksum, lambda: FunctionEditor(lambda text: Checksum(digest=text)))
    editors.register(Hostname, lambda: FunctionEditor(lambda text: Hostname(text.upper())))
    return editors.freeze()


@pytest.fixture
def value_factory(editors: EditorRegistry) -> ValueFactory:
    return ValueFactory(editors)


@pytest.fixture
def registry(editors: EditorRegistry) -> ConverterRegistry:
    """Create a registry like the default one, with the sample editors."""
    return ConverterRegistry(
        MappingConverterFactory(),
        SequenceConverterFactory(),
        ScalarConverterFactory(editors),
    )


@pytest.fixture
def converter(registry: ConverterRegistry) -> TypeConverter:
    return TypeConverter(registry)
