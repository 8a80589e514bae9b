import unittest

from minilisp.lisp_types import (
    NIL,
    LispNil,
    LispNum,
    LispSymbol,
    LispTypeError,
    SymbolTable,
    Tag,
    as_cons,
    as_expr,
    as_num,
    as_subr,
    as_text,
    from_list,
    make_cons,
    make_error,
    make_expr,
    make_num,
    make_subr,
    nreverse,
    pairlis,
    safe_car,
    safe_cdr,
    to_list,
)


def nums(*values):
    return from_list([make_num(v) for v in values])


class TestSymbols(unittest.TestCase):
    def setUp(self) -> None:
        self.symbols = SymbolTable()

    def test_intern_same_instance(self):
        a = self.symbols.intern("abc")
        self.assertIs(a, self.symbols.intern("abc"))
        self.assertIsInstance(a, LispSymbol)
        self.assertEqual(1, len(self.symbols))

    def test_intern_distinct_text(self):
        self.assertIsNot(self.symbols.intern("a"), self.symbols.intern("A"))

    def test_intern_nil(self):
        self.assertIs(NIL, self.symbols.intern("nil"))
        self.assertNotIn("nil", self.symbols)

    def test_tables_are_independent(self):
        other = SymbolTable()
        self.assertIsNot(self.symbols.intern("x"), other.intern("x"))
        self.assertNotEqual(self.symbols.intern("x"), other.intern("x"))

    def test_nil_singleton(self):
        self.assertIs(NIL, LispNil())
        self.assertIs(Tag.NIL, NIL.tag)


class TestConstructors(unittest.TestCase):
    def test_num_range(self):
        self.assertEqual(2 ** 31 - 1, make_num(2 ** 31 - 1).native())
        self.assertEqual(-(2 ** 31), make_num(-(2 ** 31)).native())
        with self.assertRaises(LispTypeError):
            make_num(2 ** 31)
        with self.assertRaises(LispTypeError):
            LispNum("1")

    def test_make_expr(self):
        symbols = SymbolTable()
        params = from_list([symbols.intern("x")])
        body = from_list([symbols.intern("x")])
        expr = make_expr(make_cons(params, body), None)
        self.assertIs(params, expr.params)
        self.assertIs(body, expr.body)
        self.assertIsNone(expr.env)

    def test_structural_equality(self):
        self.assertEqual(nums(1, 2), nums(1, 2))
        self.assertNotEqual(nums(1, 2), nums(2, 1))
        self.assertEqual(make_error("x"), make_error("x"))
        self.assertNotEqual(make_num(1), make_error("1"))


class TestProjections(unittest.TestCase):
    def test_matching_tags(self):
        symbols = SymbolTable()
        fn = lambda args: args  # noqa: E731
        pair = make_cons(NIL, NIL)
        self.assertEqual(3, as_num(make_num(3)))
        self.assertEqual("a", as_text(symbols.intern("a")))
        self.assertEqual("oops", as_text(make_error("oops")))
        self.assertIs(pair, as_cons(pair))
        self.assertIs(fn, as_subr(make_subr(fn)))
        expr = make_expr(NIL, None)
        self.assertIs(expr, as_expr(expr))

    def test_wrong_tags(self):
        for projection in (as_num, as_text, as_cons, as_subr, as_expr):
            with self.subTest(projection=projection.__name__):
                with self.assertRaises(LispTypeError):
                    projection(NIL)
        with self.assertRaises(TypeError):
            as_num(make_error("1"))

    def test_safe_car_cdr(self):
        pair = make_cons(make_num(1), make_num(2))
        self.assertEqual(make_num(1), safe_car(pair))
        self.assertEqual(make_num(2), safe_cdr(pair))
        for obj in (NIL, make_num(1), make_error("e"), SymbolTable().intern("s")):
            self.assertIs(NIL, safe_car(obj))
            self.assertIs(NIL, safe_cdr(obj))


class TestListHelpers(unittest.TestCase):
    def test_nreverse(self):
        lst = nums(1, 2, 3)
        head = nreverse(lst)
        self.assertEqual("(3 2 1)", str(head))
        # the old head is now the last cell
        self.assertEqual("(1)", str(lst))

    def test_nreverse_twice(self):
        self.assertEqual("(1 2 3)", str(nreverse(nreverse(nums(1, 2, 3)))))

    def test_nreverse_empty(self):
        self.assertIs(NIL, nreverse(NIL))

    def test_nreverse_improper(self):
        lst = make_cons(make_num(1), make_cons(make_num(2), make_num(3)))
        self.assertEqual("(2 1)", str(nreverse(lst)))

    def test_pairlis(self):
        symbols = SymbolTable()
        keys = from_list([symbols.intern("a"), symbols.intern("b")])
        self.assertEqual("((a . 1) (b . 2))", str(pairlis(keys, nums(1, 2))))

    def test_pairlis_truncates(self):
        symbols = SymbolTable()
        keys = from_list([symbols.intern("a"), symbols.intern("b")])
        self.assertEqual("((a . 1))", str(pairlis(keys, nums(1))))
        self.assertEqual("((a . 1) (b . 2))", str(pairlis(keys, nums(1, 2, 3))))
        self.assertIs(NIL, pairlis(NIL, nums(1)))

    def test_to_list(self):
        self.assertEqual([make_num(1), make_num(2)], to_list(nums(1, 2)))
        self.assertEqual([], to_list(NIL))

    def test_from_list_rejects_python_values(self):
        with self.assertRaises(LispTypeError):
            from_list([1])


class TestPrinter(unittest.TestCase):
    def test_atoms(self):
        symbols = SymbolTable()
        self.assertEqual("nil", str(NIL))
        self.assertEqual("-12", str(make_num(-12)))
        self.assertEqual("foo", str(symbols.intern("foo")))
        self.assertEqual("<error: bad>", str(make_error("bad")))
        self.assertEqual("<subr>", str(make_subr(lambda args: args)))
        self.assertEqual("<expr>", str(make_expr(NIL, None)))

    def test_lists(self):
        self.assertEqual("(1 2 3)", str(nums(1, 2, 3)))
        self.assertEqual("((1) nil)", str(from_list([nums(1), NIL])))
        self.assertEqual("(1 . 2)", str(make_cons(make_num(1), make_num(2))))
        self.assertEqual(
            "(1 2 . 3)",
            str(make_cons(make_num(1), make_cons(make_num(2), make_num(3)))),
        )


if __name__ == "__main__":
    unittest.main()
