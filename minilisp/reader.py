from __future__ import annotations
from typing import NamedTuple
import re

from .lisp_types import (
    INT32_MAX,
    INT32_MIN,
    NIL,
    LispObject,
    LispError,
    SymbolTable,
    make_cons,
    make_error,
    make_num,
    nreverse,
)


class ParseState(NamedTuple):
    obj: LispObject
    rest: str


class Reader:
    """Reads one form at a time off the front of a string.

    Failures are returned as LispError values with an empty remainder rather
    than raised."""

    SPACES = "\t\r\n "
    LPAR = "("
    RPAR = ")"
    QUOTE = "'"
    DELIMITERS = LPAR + RPAR + QUOTE + SPACES
    INT_RE = re.compile(r"[+-]?[0-9]+")

    def __init__(self, symbols: SymbolTable):
        self.symbols = symbols

    def skip_spaces(self, text: str) -> str:
        return text.lstrip(self.SPACES)

    def parse_error(self, message: str) -> ParseState:
        return ParseState(make_error(message), "")

    def make_num_or_sym(self, token: str) -> LispObject:
        if self.INT_RE.fullmatch(token):
            value = int(token)
            if INT32_MIN <= value <= INT32_MAX:
                return make_num(value)
        return self.symbols.intern(token)

    def read_atom(self, text: str) -> ParseState:
        for i, c in enumerate(text):
            if c in self.DELIMITERS:
                return ParseState(self.make_num_or_sym(text[:i]), text[i:])
        return ParseState(self.make_num_or_sym(text), "")

    def read_list(self, text: str) -> ParseState:
        ret: LispObject = NIL
        while True:
            text = self.skip_spaces(text)
            if not text:
                return self.parse_error("unfinished parenthesis")
            if text[0] == self.RPAR:
                return ParseState(nreverse(ret), text[1:])
            elm, text = self.read_form(text)
            if isinstance(elm, LispError):
                return ParseState(elm, "")
            ret = make_cons(elm, ret)

    def read_form(self, text: str) -> ParseState:
        text = self.skip_spaces(text)
        if not text:
            return self.parse_error("empty input")
        elif text[0] == self.RPAR:
            return self.parse_error("invalid syntax: " + text)
        elif text[0] == self.LPAR:
            return self.read_list(text[1:])
        elif text[0] == self.QUOTE:
            elm, rest = self.read_form(text[1:])
            quote = self.symbols.intern("quote")
            return ParseState(make_cons(quote, make_cons(elm, NIL)), rest)
        return self.read_atom(text)


def read(text: str, symbols: SymbolTable) -> ParseState:
    return Reader(symbols).read_form(text)
