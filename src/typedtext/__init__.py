from typedtext.containers import SortedDict, SortedSet
from typedtext.conversion.editors import Editor, EditorRegistry, FunctionEditor
from typedtext.conversion.exceptions import (
    ConstructionError,
    ConversionError,
    NoConversionStrategyError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from typedtext.converter import TypeConverter, convert
from typedtext._version import __version__

__all__ = [
    "convert",
    "TypeConverter",
    "SortedSet",
    "SortedDict",
    "Editor",
    "EditorRegistry",
    "FunctionEditor",
    "ConversionError",
    "UnsupportedTypeError",
    "TypeMismatchError",
    "NoConversionStrategyError",
    "ConstructionError",
    "__version__",
]
