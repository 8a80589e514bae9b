from __future__ import annotations
from typing import Optional

from .lisp_types import (
    NIL,
    LispObject,
    LispCons,
    SymbolTable,
    make_cons,
    make_error,
    pairlis,
)


class Env(object):
    """Lisp environment: a list of frames, each an alist of (symbol . value).

    Every Env derived from a global one shares its symbol table and keeps a
    reference to it, so definitions can always reach the global frame."""

    def __init__(
        self,
        frames: LispObject,
        symbols: Optional[SymbolTable] = None,
        outer: Optional[Env] = None,
    ) -> None:
        self._frames = frames
        self._global: Env = outer._global if outer else self
        if outer is not None:
            symbols = outer.symbols
        elif symbols is None:
            symbols = SymbolTable()
        self.symbols: SymbolTable = symbols

    @classmethod
    def make_global(cls, symbols: Optional[SymbolTable] = None) -> Env:
        return cls(make_cons(NIL, NIL), symbols=symbols)

    @property
    def frames(self) -> LispObject:
        return self._frames

    @property
    def global_env(self) -> Env:
        return self._global

    def extend(self, params: LispObject, args: LispObject) -> Env:
        """Return a new environment with one frame binding params to args."""
        return Env(make_cons(pairlis(params, args), self._frames), outer=self)

    def find(self, sym: LispObject) -> Optional[LispCons]:
        frames = self._frames
        while isinstance(frames, LispCons):
            alist = frames.car
            while isinstance(alist, LispCons):
                pair = alist.car
                if isinstance(pair, LispCons) and pair.car is sym:
                    return pair
                alist = alist.cdr
            frames = frames.cdr
        return None

    def get(self, sym: LispObject) -> LispObject:
        pair = self.find(sym)
        if pair is None:
            return make_error(sym.readable_str() + " has no value")
        return pair.cdr

    def set(self, sym: LispObject, value: LispObject) -> LispObject:
        """Bind sym in the innermost frame, shadowing earlier bindings."""
        frame = self._frames
        assert isinstance(frame, LispCons)
        frame.car = make_cons(make_cons(sym, value), frame.car)
        return value

    def __repr__(self) -> str:
        return f"environment: {self._frames.readable_str()}"
