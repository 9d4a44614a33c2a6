"""Parser turning program text into a function body of values."""

from __future__ import annotations

from .types import (
    EuChar,
    EuF32,
    EuF64,
    EuFn,
    EuI32,
    EuI64,
    EuIsize,
    EuStr,
    EuType,
    EuU32,
    EuU64,
    EuUsize,
    EuWord,
)

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_WORD_STOP = frozenset("`\"'()")
# str.isspace counts the ASCII separators as whitespace; the language does not.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

_INT_SUFFIXES = (
    ("isize", EuIsize, int),
    ("usize", EuUsize, int),
    ("i32", EuI32, int),
    ("u32", EuU32, int),
    ("f32", EuF32, float),
    ("i64", EuI64, int),
    ("u64", EuU64, int),
    ("f64", EuF64, float),
)
_FLOAT_SUFFIXES = (("f32", EuF32), ("f64", EuF64))
_FORBIDDEN_FLOAT_SUFFIXES = ("isize", "usize", "i32", "u32", "i64", "u64")

_SIMPLE_ESCAPES = {"0": "\0", "n": "\n", "r": "\r", "t": "\t"}


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


class ParseError(ValueError):
    """Raised when program text cannot be parsed."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at offset {position}")
        self.message = message
        self.position = position


class _Backtrack(Exception):
    """An alternative did not match; another may be tried."""


class _Parser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def _peek(self) -> str | None:
        return self.text[self.pos] if self.pos < len(self.text) else None

    def _take_while(self, predicate, limit: int | None = None) -> str:
        start = self.pos
        end = len(self.text) if limit is None else min(len(self.text), start + limit)
        while self.pos < end and predicate(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def _skip_ws(self) -> None:
        self._take_while(_is_whitespace)

    def _fail(self, message: str) -> ParseError:
        return ParseError(message, self.pos)

    def program(self) -> EuFn:
        items = []
        while True:
            start = self.pos
            self._skip_ws()
            try:
                items.append(self._item())
            except _Backtrack:
                self.pos = start
                break
        self._skip_ws()
        return EuFn(items)

    def _item(self) -> EuType:
        ch = self._peek()
        if ch is None or ch == ")":
            raise _Backtrack
        if ch == "`":
            return self._raw_str()
        if ch == '"':
            return self._str()
        if ch == "'":
            return self._char()
        if ch == "(":
            return self._fn()
        if ch == ".":
            start = self.pos
            try:
                return self._num()
            except _Backtrack:
                self.pos = start
                return self._word()
        if ch in _DIGITS:
            return self._num()
        return self._word()

    def _str(self) -> EuStr:
        self.pos += 1
        chars = []
        while (ch := self._peek()) is not None and ch != '"':
            atom = self._char_atom()
            if atom is not None:
                chars.append(atom)
        if self._peek() == '"':
            self.pos += 1
        return EuStr("".join(chars))

    def _raw_str(self) -> EuStr:
        self.pos += 1
        end = self.text.find("`", self.pos)
        if end < 0:
            end = len(self.text)
        content = self.text[self.pos:end]
        self.pos = end
        if self._peek() == "`":
            self.pos += 1
        return EuStr(content)

    def _char(self) -> EuChar:
        self.pos += 1
        try:
            atom = self._char_atom()
        except _Backtrack:
            raise self._fail("char: unexpected end of input") from None
        if atom is None:
            raise self._fail("char: line continuation is not a character")
        return EuChar(atom)

    def _char_atom(self) -> str | None:
        ch = self._peek()
        if ch is None:
            raise _Backtrack
        self.pos += 1
        if ch != "\\":
            return ch
        escape = self._peek()
        if escape is None:
            raise self._fail("escape: unexpected end of input")
        self.pos += 1
        if escape == "\n":
            return None
        if escape in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[escape]
        if escape == "x":
            return self._hex_escape()
        if escape == "u":
            return self._unicode_escape()
        return escape

    def _hex_escape(self) -> str:
        pair = self.text[self.pos:self.pos + 2]
        if len(pair) != 2 or not all(c in _HEX_DIGITS for c in pair):
            raise self._fail(
                "hex pair escape: expected `\\xHH` where `H` is a hexadecimal digit"
            )
        self.pos += 2
        return chr(int(pair, 16))

    def _unicode_escape(self) -> str:
        expected = "unicode escape: expected `\\u{H...}` where `H...` is 1-6 hexadecimal digits"
        if self._peek() != "{":
            raise self._fail(expected)
        self.pos += 1
        digits = self._take_while(lambda c: c in _HEX_DIGITS, limit=6)
        if not digits:
            raise self._fail(expected)
        if self._peek() == "}":
            self.pos += 1
        codepoint = int(digits, 16)
        if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDFFF:
            raise self._fail("unicode escape: expected valid codepoint")
        return chr(codepoint)

    def _fn(self) -> EuFn:
        self.pos += 1
        body = self.program()
        if self._peek() == ")":
            self.pos += 1
        return body

    def _digits(self) -> str:
        return self._take_while(lambda c: c in _DIGITS)

    def _num(self) -> EuType:
        start = self.pos
        whole = self._digits()
        fraction = None
        if self._peek() == ".":
            self.pos += 1
            fraction = self._digits()
        has_exponent = False
        before_exponent = self.pos
        if self._peek() in ("e", "E"):
            self.pos += 1
            if self._peek() in ("+", "-"):
                self.pos += 1
            if self._digits():
                has_exponent = True
            else:
                self.pos = before_exponent
        if not whole and not fraction:
            raise _Backtrack
        literal = self.text[start:self.pos]
        if fraction is not None or has_exponent:
            return self._float_suffix(literal)
        return self._int_suffix(literal)

    def _int_suffix(self, literal: str) -> EuType:
        for suffix, cls, convert in _INT_SUFFIXES:
            if self.text.startswith(suffix, self.pos):
                try:
                    value = cls(convert(literal))
                except ValueError:
                    continue
                self.pos += len(suffix)
                return value
        try:
            return EuI64(int(literal))
        except ValueError:
            raise self._fail(f"invalid I64 literal {literal!r}") from None

    def _float_suffix(self, literal: str) -> EuType:
        if any(self.text.startswith(s, self.pos) for s in _FORBIDDEN_FLOAT_SUFFIXES):
            raise self._fail(
                "float suffix: expected none of [`isize` `usize` `i32` `u32` `i64` `u64`]"
            )
        for suffix, cls in _FLOAT_SUFFIXES:
            if self.text.startswith(suffix, self.pos):
                self.pos += len(suffix)
                return cls(float(literal))
        return EuF64(float(literal))

    def _word(self) -> EuWord:
        return EuWord(
            self._take_while(lambda c: c not in _WORD_STOP and not _is_whitespace(c))
        )


def parse_peek(text: str) -> tuple[str, EuFn]:
    """Parse as much of ``text`` as forms a program; return the rest and the program."""
    parser = _Parser(text)
    program = parser.program()
    return text[parser.pos:], program


def parse(text: str) -> EuFn:
    """Parse the whole of ``text`` as a program, raising ParseError otherwise."""
    rest, program = parse_peek(text)
    if rest:
        raise ParseError(f"unexpected input {rest[:20]!r}", len(text) - len(rest))
    return program


def run() -> str:
    """Parse a small sample program and describe the outcome."""
    try:
        _, program = parse_peek("asdf")
    except ParseError as error:
        return f"Err({error})"
    return f"Ok({program!r})"