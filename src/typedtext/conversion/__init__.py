from typedtext.conversion.mappings import MappingConverterFactory
from typedtext.conversion.registry import ConverterRegistry
from typedtext.conversion.scalars import ScalarConverterFactory
from typedtext.conversion.sequences import SequenceConverterFactory

default_registry = ConverterRegistry(
    MappingConverterFactory(),
    SequenceConverterFactory(),
    ScalarConverterFactory(),
)
