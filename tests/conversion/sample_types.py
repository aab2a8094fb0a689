"""Target types exercising each construction strategy."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Mode(Enum):
    fast = "f"
    slow = "s"


@dataclass(frozen=True, order=True)
class Hostname:
    """Built through its single-argument constructor."""

    value: str


@dataclass(frozen=True)
class Version:
    """Built through a classmethod factory; the constructor needs two arguments."""

    major: int
    minor: int

    @classmethod
    def parse(cls, text: str) -> Self:
        major, minor = text.split(".")
        return cls(int(major), int(minor))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class Percent:
    """Built through a staticmethod factory; other public methods are ignored."""

    def __init__(self, value: float, *, scale: int) -> None:
        self.value = value
        self.scale = scale

    @staticmethod
    def describe(text: str) -> str:
        return f"percentage {text}"

    @staticmethod
    def of(text: str) -> "Percent":
        return Percent(float(text.rstrip("%")), scale=100)


class Port(int):
    """Subclass of a builtin whose constructor parses text."""


class Checksum:
    """Only buildable through a registered editor."""

    def __init__(self, *, digest: str) -> None:
        self.digest = digest

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Checksum) and other.digest == self.digest

    def __hash__(self) -> int:
        return hash(self.digest)


class Strict:
    """Constructor rejects everything but lowercase text."""

    def __init__(self, text: str) -> None:
        if not text.islower():
            raise ValueError(f"{text!r} is not lowercase")
        self.text = text


class Opaque:
    """No way to build this from text."""


class Celsius:
    """Constructor takes a number; text goes through the classmethod factory."""

    def __init__(self, degrees: float) -> None:
        self.degrees = degrees

    @classmethod
    def parse(cls, text: str) -> Self:
        return cls(float(text.removesuffix("C")))
