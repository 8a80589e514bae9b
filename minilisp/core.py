from __future__ import annotations
from typing import Dict

from .lisp_types import (
    LispObject,
    LispSubr,
    make_cons,
    make_subr,
    safe_car,
    safe_cdr,
)


def python_print(s: str):
    print(s)


def car(args: LispObject) -> LispObject:
    return safe_car(safe_car(args))


def cdr(args: LispObject) -> LispObject:
    return safe_cdr(safe_car(args))


def cons(args: LispObject) -> LispObject:
    return make_cons(safe_car(args), safe_car(safe_cdr(args)))


ns: Dict[str, LispSubr] = {
    "car": make_subr(car),
    "cdr": make_subr(cdr),
    "cons": make_subr(cons),
}
