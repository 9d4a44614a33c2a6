"""Value types of the language and the interpreter state that holds them."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Iterator


class EuType:
    """Base class of every value the language knows about."""

    __slots__ = ()


def _to_f32(number: float) -> float:
    """Round a float to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


@dataclass(frozen=True)
class EuBool(EuType):
    """A boolean."""

    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(f"EuBool needs a bool, got {type(self.value).__name__}")


@dataclass(frozen=True)
class _EuInt(EuType):
    value: int

    MIN: ClassVar[int] = 0
    MAX: ClassVar[int] = 0

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} needs an int, got {type(self.value).__name__}"
            )
        if not self.MIN <= self.value <= self.MAX:
            raise ValueError(
                f"{self.value} is out of range for {type(self).__name__}"
                f" [{self.MIN}, {self.MAX}]"
            )


class EuIsize(_EuInt):
    """A pointer-sized signed integer (64 bits)."""

    MIN = -(2**63)
    MAX = 2**63 - 1


class EuUsize(_EuInt):
    """A pointer-sized unsigned integer (64 bits)."""

    MIN = 0
    MAX = 2**64 - 1


class EuI32(_EuInt):
    """A 32-bit signed integer."""

    MIN = -(2**31)
    MAX = 2**31 - 1


class EuU32(_EuInt):
    """A 32-bit unsigned integer."""

    MIN = 0
    MAX = 2**32 - 1


class EuI64(_EuInt):
    """A 64-bit signed integer."""

    MIN = -(2**63)
    MAX = 2**63 - 1


class EuU64(_EuInt):
    """A 64-bit unsigned integer."""

    MIN = 0
    MAX = 2**64 - 1


@dataclass(frozen=True)
class _EuFloat(EuType):
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(
                f"{type(self).__name__} needs a number, got {type(self.value).__name__}"
            )
        object.__setattr__(self, "value", self._round(float(self.value)))

    @staticmethod
    def _round(number: float) -> float:
        return number


class EuF32(_EuFloat):
    """A single-precision float; the value is rounded on construction."""

    @staticmethod
    def _round(number: float) -> float:
        return _to_f32(number)


class EuF64(_EuFloat):
    """A double-precision float."""


@dataclass(frozen=True)
class EuChar(EuType):
    """A single Unicode scalar value."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"EuChar needs a str, got {type(self.value).__name__}")
        if len(self.value) != 1:
            raise ValueError(f"EuChar needs exactly one character, got {self.value!r}")


@dataclass(frozen=True)
class _EuText(EuType):
    value: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{type(self).__name__} needs a str, got {type(self.value).__name__}"
            )

    def __str__(self) -> str:
        return self.value


class EuStr(_EuText):
    """A string literal."""


class EuWord(_EuText):
    """A bare word, such as the name of an operation."""


@dataclass(frozen=True)
class EuOpt(EuType):
    """An optional value: either empty or holding one value."""

    value: EuType | None = None

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, EuType):
            raise TypeError(f"EuOpt holds an EuType, got {type(self.value).__name__}")


@dataclass(frozen=True)
class _EuSeq(EuType):
    value: tuple[EuType, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.value)
        for item in items:
            if not isinstance(item, EuType):
                raise TypeError(
                    f"{type(self).__name__} holds EuType values, got {type(item).__name__}"
                )
        object.__setattr__(self, "value", items)

    def __iter__(self) -> Iterator[EuType]:
        return iter(self.value)

    def __len__(self) -> int:
        return len(self.value)

    def __getitem__(self, index: int) -> EuType:
        return self.value[index]


class EuVec(_EuSeq):
    """An array of values."""

    def __init__(self, value: Iterable[EuType] = ()) -> None:
        super().__init__(value)


class EuFn(_EuSeq):
    """A function body: the sequence of values it evaluates."""

    def __init__(self, value: Iterable[EuType] = ()) -> None:
        super().__init__(value)


@dataclass
class State:
    """Interpreter state: the value stack, the program and the named scope."""

    stack: EuVec = field(default_factory=EuVec)
    ast: EuFn = field(default_factory=EuFn)
    scope: dict[str, EuType] = field(default_factory=dict)