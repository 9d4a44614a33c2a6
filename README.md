# euphrates

Parser and value types for Euphrates, a small stack-based language.

## The language

A Euphrates program is a sequence of values separated by optional whitespace:

- integers such as `1234`, with an optional type suffix (`isize`, `usize`,
  `i32`, `u32`, `i64`, `u64`); with no suffix they are `i64`. An integer
  followed by `f32` or `f64` becomes a float of that kind.
- floats: a literal with a decimal point or an exponent, such as `1234.5`,
  `.5`, `123.`, `123e-4` or `12.34e5`, optionally followed by `f32` or `f64`;
  with no suffix they are `f64`. An integer suffix after a float is an error.
- strings in double quotes. Escapes are `\n`, `\r`, `\t`, `\0`, `\xHH` (two
  hex digits), `\u{H...}` (1 to 6 hex digits, a valid code point), and a
  backslash before a newline, which continues the line; a backslash before
  any other character stands for that character.
- raw strings in backticks, taken as written with no escapes.
- characters, written with a single leading quote: `'a`, `'\n`, `''`.
- functions, written as parenthesised sequences: `(1 2 +)`.
- words: anything else, up to whitespace, a quote, a backtick or a
  parenthesis, e.g. `+`, `map`, `.asdf`.

A value may follow another with no space between them, so `123ever` is the
integer `123` followed by the word `ever`, and `1234.5.678` is two floats.
A closing quote, backtick or parenthesis at the end of the input may be left
out.

## Installation

```
pip install .
```

## Usage

```python
from euphrates.parser import parse, parse_peek, ParseError
from euphrates.types import EuFn, EuI64, EuWord

program = parse("(1 2+)map")
assert program == EuFn([EuFn([EuI64(1), EuI64(2), EuWord("+")]), EuWord("map")])

rest, program = parse_peek("())asdf")
assert rest == ")asdf"

try:
    parse("())asdf")
except ParseError as err:
    print("rejected:", err, "at", err.position)
```

- `parse(text)` parses the whole input and raises `ParseError` (a
  `ValueError`) if anything is left over or a literal is malformed.
- `parse_peek(text)` returns a pair of the unparsed rest of the input and the
  parsed program; it still raises `ParseError` on malformed literals such as
  a bad escape.
- `run()` parses the sample program `asdf` and returns a string describing
  the result.

`ParseError` carries `message` and `position` (the offset into the input).

## Value types

`euphrates.types` defines one immutable class for each kind of value:
`EuBool`, `EuIsize`, `EuUsize`, `EuI32`, `EuU32`, `EuF32`, `EuI64`, `EuU64`,
`EuF64`, `EuChar`, `EuStr`, `EuWord`, `EuOpt`, `EuVec` and `EuFn`, all
subclasses of `EuType`. Each keeps its content in `value`.

- Integer classes check their range and raise `ValueError` when a number
  does not fit (`EuIsize` and `EuUsize` are 64 bits wide).
- `EuF32` rounds its value to single precision.
- `EuChar` holds exactly one character.
- `EuVec` and `EuFn` hold a tuple of values and can be iterated, indexed and
  measured with `len`.

Values compare by kind and content, so `EuI64(1) != EuI32(1)`.

`State` is a plain container for an interpreter's `stack` (`EuVec`), `ast`
(`EuFn`) and `scope` (a `dict` of names to values).

## What it does not do

The package parses programs and describes their values; it does not evaluate
them. There is no interpreter that runs a parsed program against a `State`,
no built-in words, and no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```