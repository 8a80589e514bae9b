from __future__ import annotations
import logging
import readline
import traceback
from typing import Optional

from . import core
from . import reader
from .env import Env
from .lisp_types import (
    NIL,
    LispObject,
    LispCons,
    LispError,
    LispException,
    LispExpr,
    LispSubr,
    LispSymbol,
    SymbolTable,
    make_cons,
    make_error,
    make_expr,
    nreverse,
    safe_car,
    safe_cdr,
)

log = logging.getLogger(__name__)


def READ(x: str, env: Env) -> LispObject:
    obj, rest = reader.read(x, env.symbols)
    if rest.strip():
        log.debug("ignoring text after first form: %r", rest)
    return obj


def evlis(lst: LispObject, env: Env) -> LispObject:
    ret: LispObject = NIL
    while isinstance(lst, LispCons):
        elm = EVAL(lst.car, env)
        if isinstance(elm, LispError):
            return elm
        ret = make_cons(elm, ret)
        lst = lst.cdr
    return nreverse(ret)


def progn(body: LispObject, env: Env) -> LispObject:
    ret: LispObject = NIL
    while isinstance(body, LispCons):
        ret = EVAL(body.car, env)
        body = body.cdr
    return ret


def apply(f: LispObject, args: LispObject) -> LispObject:
    if isinstance(f, LispError):
        return f
    elif isinstance(args, LispError):
        return args
    elif isinstance(f, LispSubr):
        return f.call(args)
    elif isinstance(f, LispExpr):
        return progn(f.body, f.env.extend(f.params, args))
    return make_error(f.readable_str() + " is not function")


def EVAL(ast: LispObject, env: Env) -> LispObject:
    if isinstance(ast, LispSymbol):
        return env.get(ast)
    if not isinstance(ast, LispCons):
        return ast

    symbols = env.symbols
    op = ast.car
    args = ast.cdr
    if op is symbols.intern("quote"):
        return safe_car(args)
    elif op is symbols.intern("if"):
        condition = EVAL(safe_car(args), env)
        if isinstance(condition, LispError):
            return condition
        elif condition is NIL:
            return EVAL(safe_car(safe_cdr(safe_cdr(args))), env)
        return EVAL(safe_car(safe_cdr(args)), env)
    elif op is symbols.intern("lambda"):
        return make_expr(args, env)
    elif op is symbols.intern("defun"):
        name = safe_car(args)
        env.global_env.set(name, make_expr(safe_cdr(args), env))
        return name
    return apply(EVAL(op, env), evlis(args, env))


def PRINT(x: LispObject) -> str:
    return str(x)


def rep(x: str, env: Env) -> str:
    ast = READ(x, env)
    log.debug("READ: %s", ast)
    result = EVAL(ast, env)
    log.debug("EVAL: %s", result)
    return PRINT(result)


def init_repl_env(symbols: Optional[SymbolTable] = None) -> Env:
    env = Env.make_global(symbols)
    for key in core.ns:
        env.set(env.symbols.intern(key), core.ns[key])

    t = env.symbols.intern("t")
    env.set(t, t)
    return env


def rep_handling_exceptions(line: str, repl_env: Env, verbose: bool = False) -> str:
    try:
        return rep(line, repl_env)
    except LispException as e:
        m = "ERROR: " + str(e)
        if verbose:
            m += "\n" + traceback.format_exc()
        return m


def repl(env: Env, verbose: bool = False, prompt: str = "> "):
    # repl loop
    eof: bool = False

    while not eof:
        try:
            line = input(prompt)
            readline.add_history(line)
            core.python_print(rep_handling_exceptions(line, env, verbose))
        except EOFError:
            eof = True


def load_file(env: Env, filename: str) -> str:
    result = PRINT(NIL)
    with open(filename, "r") as the_file:
        for line in the_file:
            if line.strip():
                result = rep_handling_exceptions(line, env)
    return result
