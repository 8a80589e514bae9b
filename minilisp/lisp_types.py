from __future__ import annotations
from typing import Callable, Dict, Iterable, List, Any, TYPE_CHECKING
import abc
import enum

if TYPE_CHECKING:
    from .env import Env

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class Tag(enum.Enum):
    NIL = "nil"
    NUM = "num"
    SYM = "sym"
    ERROR = "error"
    CONS = "cons"
    SUBR = "subr"
    EXPR = "expr"


class LispException(Exception):
    pass


class LispTypeError(LispException, TypeError):
    """Raised when a value is used as the wrong variant.

    These are bugs in Python code driving the interpreter, never the result of
    user input; user-facing failures are LispError values."""

    def __init__(self, obj: Any, reason: str) -> None:
        super().__init__(f"{obj!r}: invalid value: {reason}")


class LispObject(metaclass=abc.ABCMeta):
    tag: Tag

    @abc.abstractmethod
    def native(self) -> Any:
        """Return the shallow Python payload of the value."""

    @abc.abstractmethod
    def readable_str(self) -> str:
        """Return the printed (reader input) form of the value."""

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.native() == other.native()
        return False

    def __hash__(self):
        return hash((self.tag, self.native()))

    def __str__(self) -> str:
        return self.readable_str()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.readable_str()}>"


class LispNil(LispObject):
    tag = Tag.NIL
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def native(self) -> None:
        return None

    def readable_str(self) -> str:
        return "nil"

    __eq__ = object.__eq__
    __hash__ = object.__hash__


NIL = LispNil()


class LispNum(LispObject):
    tag = Tag.NUM

    def __init__(self, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise LispTypeError(value, "not an int")
        if not INT32_MIN <= value <= INT32_MAX:
            raise LispTypeError(value, "out of 32-bit range")
        self._value = value

    def native(self) -> int:
        return self._value

    def readable_str(self) -> str:
        return str(self._value)


class LispSymbol(LispObject):
    """An interned name. Only SymbolTable.intern should construct these."""

    tag = Tag.SYM

    def __init__(self, name: str) -> None:
        self._name = name

    def native(self) -> str:
        return self._name

    def readable_str(self) -> str:
        return self._name

    __eq__ = object.__eq__
    __hash__ = object.__hash__


class LispError(LispObject):
    tag = Tag.ERROR

    def __init__(self, message: str) -> None:
        self._message = message

    def native(self) -> str:
        return self._message

    def readable_str(self) -> str:
        return "<error: " + self._message + ">"


class LispCons(LispObject):
    tag = Tag.CONS

    def __init__(self, car: LispObject, cdr: LispObject) -> None:
        self.car = car
        self.cdr = cdr

    def native(self):
        return (self.car, self.cdr)

    __hash__ = None  # type: ignore

    def readable_str(self) -> str:
        parts: List[str] = []
        obj: LispObject = self
        while isinstance(obj, LispCons):
            parts.append(obj.car.readable_str())
            obj = obj.cdr
        tail = "" if obj is NIL else " . " + obj.readable_str()
        return "(" + " ".join(parts) + tail + ")"


class LispSubr(LispObject):
    tag = Tag.SUBR

    def __init__(self, fn: Callable[[LispObject], LispObject]) -> None:
        self._fn = fn

    def native(self) -> Callable[[LispObject], LispObject]:
        return self._fn

    def readable_str(self) -> str:
        return "<subr>"

    def call(self, args: LispObject) -> LispObject:
        return self._fn(args)

    __eq__ = object.__eq__
    __hash__ = object.__hash__


class LispExpr(LispObject):
    tag = Tag.EXPR

    def __init__(self, params: LispObject, body: LispObject, env: Env) -> None:
        self.params = params
        self.body = body
        self.env = env

    def native(self) -> LispExpr:
        return self

    def readable_str(self) -> str:
        return "<expr>"

    __eq__ = object.__eq__
    __hash__ = object.__hash__


class SymbolTable:
    """Maps text to the one LispSymbol carrying it."""

    def __init__(self) -> None:
        self._symbols: Dict[str, LispSymbol] = {}

    def intern(self, name: str) -> LispObject:
        if name == "nil":
            return NIL
        sym = self._symbols.get(name)
        if sym is None:
            sym = self._symbols[name] = LispSymbol(name)
        return sym

    def __contains__(self, name: str) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)


def make_num(value: int) -> LispNum:
    return LispNum(value)


def make_error(message: str) -> LispError:
    return LispError(message)


def make_cons(car: LispObject, cdr: LispObject) -> LispCons:
    return LispCons(car, cdr)


def make_subr(fn: Callable[[LispObject], LispObject]) -> LispSubr:
    return LispSubr(fn)


def make_expr(args: LispObject, env: Env) -> LispExpr:
    """Build a closure from the (params body...) tail of a lambda form."""
    return LispExpr(safe_car(args), safe_cdr(args), env)


def as_num(obj: LispObject) -> int:
    if not isinstance(obj, LispNum):
        raise LispTypeError(obj, "not a num")
    return obj.native()


def as_text(obj: LispObject) -> str:
    if not isinstance(obj, (LispSymbol, LispError)):
        raise LispTypeError(obj, "not a symbol or error")
    return obj.native()


def as_cons(obj: LispObject) -> LispCons:
    if not isinstance(obj, LispCons):
        raise LispTypeError(obj, "not a cons")
    return obj


def as_subr(obj: LispObject) -> Callable[[LispObject], LispObject]:
    if not isinstance(obj, LispSubr):
        raise LispTypeError(obj, "not a subr")
    return obj.native()


def as_expr(obj: LispObject) -> LispExpr:
    if not isinstance(obj, LispExpr):
        raise LispTypeError(obj, "not an expr")
    return obj


def safe_car(obj: LispObject) -> LispObject:
    if isinstance(obj, LispCons):
        return obj.car
    return NIL


def safe_cdr(obj: LispObject) -> LispObject:
    if isinstance(obj, LispCons):
        return obj.cdr
    return NIL


def nreverse(lst: LispObject) -> LispObject:
    """Reverse a list in place by relinking its cells, returning the new head.

    The cells of lst are reused, so lst must not be used afterwards. Any
    non-nil tail of an improper list is dropped."""
    ret: LispObject = NIL
    while isinstance(lst, LispCons):
        tmp = lst.cdr
        lst.cdr = ret
        ret = lst
        lst = tmp
    return ret


def pairlis(keys: LispObject, values: LispObject) -> LispObject:
    """Zip two lists into an alist, stopping at the end of the shorter one."""
    ret: LispObject = NIL
    while isinstance(keys, LispCons) and isinstance(values, LispCons):
        ret = make_cons(make_cons(keys.car, values.car), ret)
        keys = keys.cdr
        values = values.cdr
    return nreverse(ret)


def from_list(values: Iterable[LispObject]) -> LispObject:
    ret: LispObject = NIL
    for value in values:
        if not isinstance(value, LispObject):
            raise LispTypeError(value, "not a lisp value")
        ret = make_cons(value, ret)
    return nreverse(ret)


def to_list(lst: LispObject) -> List[LispObject]:
    values = []
    while isinstance(lst, LispCons):
        values.append(lst.car)
        lst = lst.cdr
    return values
