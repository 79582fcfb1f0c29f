"""PHP array translation loader.

Reads files of the form

    <?php
    return array(
        'greeting' => 'Hello',
        'form' => ['submit' => "Send"],
    );

Only literal arrays of strings, numbers, booleans and null are supported.
The file is tokenized and parsed, never executed.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from translationloader.domain.errors import LoadError
from translationloader.infrastructure.loaders.base import FileLoader

_TOKEN_RE = re.compile(
    r"""
      (?P<skip>\s+|//[^\n]*|\#[^\n]*|/\*.*?\*/)
    | (?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
    | (?P<number>-?\d+(?:\.\d+)?)
    | (?P<array>(?i:array)\s*\()
    | (?P<arrow>=>)
    | (?P<punct>[\[\](),;])
    | (?P<word>[A-Za-z_]\w*)
    """,
    re.VERBOSE | re.DOTALL,
)

_DOUBLE_QUOTED_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "f": "\f",
    "e": "\x1b",
    "0": "\0",
    "\\": "\\",
    "$": "$",
    '"': '"',
}

_CONSTANTS = {"true": "1", "false": "", "null": None}


def _unescape(literal: str) -> str:
    quote, body = literal[0], literal[1:-1]
    if quote == "'":
        return re.sub(r"\\([\\'])", r"\1", body)
    return re.sub(
        r"\\(.)",
        lambda m: _DOUBLE_QUOTED_ESCAPES.get(m.group(1), m.group(0)),
        body,
        flags=re.DOTALL,
    )


def tokenize(source: str) -> list[tuple[str, str]]:
    """Split PHP source into (kind, value) tokens, dropping whitespace and comments."""
    tokens: list[tuple[str, str]] = []
    pos = 0
    while pos < len(source):
        match = _TOKEN_RE.match(source, pos)
        if match is None:
            raise ValueError(f"unexpected input at offset {pos}: {source[pos:pos + 20]!r}")
        kind = match.lastgroup
        if kind != "skip":
            tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


class _ArrayParser:
    def __init__(self, tokens: list[tuple[str, str]]) -> None:
        self.tokens = tokens
        self.pos = 0

    def _peek(self) -> tuple[str, str] | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> tuple[str, str]:
        token = self._peek()
        if token is None:
            raise ValueError("unexpected end of file")
        self.pos += 1
        return token

    def parse_file(self) -> Any:
        kind, value = self._next()
        if kind != "word" or value.lower() != "return":
            raise ValueError(f"expected 'return', found {value!r}")
        result = self.parse_value()
        token = self._peek()
        if token is not None and token[1] == ";":
            self.pos += 1
        if self._peek() is not None:
            raise ValueError(f"unexpected trailing token {self._peek()[1]!r}")
        return result

    def parse_value(self) -> Any:
        kind, value = self._next()
        if kind == "string":
            return _unescape(value)
        if kind == "number":
            return value
        if kind == "array":
            return self._parse_entries(")")
        if value == "[":
            return self._parse_entries("]")
        if kind == "word" and value.lower() in _CONSTANTS:
            return _CONSTANTS[value.lower()]
        raise ValueError(f"unsupported value {value!r}")

    def _parse_entries(self, closing: str) -> dict[str, Any]:
        entries: dict[str, Any] = {}
        next_index = 0
        while True:
            token = self._peek()
            if token is None:
                raise ValueError(f"unterminated array, expected {closing!r}")
            if token[1] == closing:
                self.pos += 1
                return entries

            value = self.parse_value()
            token = self._peek()
            if token is not None and token[0] == "arrow":
                self.pos += 1
                key = "" if value is None else str(value)
                value = self.parse_value()
                if key.lstrip("-").isdigit():
                    next_index = max(next_index, int(key) + 1)
            else:
                key = str(next_index)
                next_index += 1
            entries[key] = value

            token = self._peek()
            if token is not None and token[1] == ",":
                self.pos += 1
            elif token is None or token[1] != closing:
                raise ValueError(f"expected ',' or {closing!r}")


class PhpFileLoader(FileLoader):
    name = "php"

    def _read(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()

        source = source.strip()
        if source.startswith("<?php"):
            source = source[len("<?php"):]
        if source.endswith("?>"):
            source = source[:-2]

        try:
            tokens = tokenize(source)
            if not tokens:
                return None
            return _ArrayParser(tokens).parse_file()
        except ValueError as e:
            raise LoadError(path, f"invalid PHP array: {e}") from e
