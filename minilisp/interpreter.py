from __future__ import annotations
from typing import Optional

from .rep import init_repl_env, repl, load_file, rep, EVAL, READ
from .lisp_types import LispObject, SymbolTable


class Lisp:
    def __init__(
        self,
        symbols: Optional[SymbolTable] = None,
        verbose: bool = False,
        prompt: str = "> ",
    ):
        self.env = init_repl_env(symbols)
        self.verbose = verbose
        self.prompt = prompt

    @property
    def symbols(self) -> SymbolTable:
        return self.env.symbols

    def eval(self, expr: str) -> LispObject:
        return EVAL(READ(expr, self.env), self.env)

    def rep(self, expr: str) -> str:
        return rep(expr, self.env)

    def load_file(self, filename: str) -> str:
        return load_file(self.env, filename)

    def repl(self):
        repl(self.env, self.verbose, self.prompt)
