import datetime as dt

import pytest

from risp.types.errors import NoChildren, NotANumber, WrongType
from risp.types.val import (
    Bool, Date, DateTime, Float, Fun, List, Num, Risp, Sym, Time,
    from_python, num, to_python,
)


def test_structural_equality():
    assert List.of(Num(1), Sym("a")) == List.of(Num(1), Sym("a"))
    assert List.of(Num(1)) != Risp.of(Num(1))
    assert Num(1) != Float(1.0)
    assert Bool(True) != Num(1)


def test_fun_equality_is_by_name_only():
    assert Fun("+", "add") == Fun("+", "mul")
    assert Fun("+", "add") != Fun("add", "add")
    assert hash(Fun("+", "add")) == hash(Fun("+", "sub"))


def test_values_are_immutable():
    v = Num(1)
    with pytest.raises(AttributeError):
        v.value = 2


@pytest.mark.parametrize(
    "value, text",
    [
        (Bool(True), "true"),
        (Bool(False), "false"),
        (Num(-42), "-42"),
        (Float(3.5), "3.5"),
        (Float(3.0), "3.0"),
        (Float(1e20), "100000000000000000000.0"),
        (Float(1.5e-7), "0.00000015"),
        (Sym("temp"), "temp"),
        (Time(dt.time(7, 5, 9)), "07:05:09"),
        (Date(dt.date(2024, 5, 1)), "2024-05-01"),
        (DateTime(dt.datetime(2024, 5, 1, 7, 5, 9, 123)), "2024-05-01T07:05:09"),
        (Fun("+", "add"), "<builtin: +>"),
        (List.of(Sym("+"), Num(1), List.of(Num(2))), "(+ 1 (2))"),
        (List(), "()"),
        (Risp.of(Num(1)), "<toplevel>"),
    ]
)
def test_render(value, text):
    assert str(value) == text


def test_len_and_pop():
    lst = List.of(Num(1), Num(2), Num(3))
    assert lst.len() == 3
    head, rest = lst.pop(0)
    assert head == Num(1)
    assert rest == List.of(Num(2), Num(3))
    # the original is untouched
    assert lst.len() == 3
    last, rest = Risp.of(Num(1), Num(2)).pop(-1)
    assert last == Num(2)
    assert rest == Risp.of(Num(1))


def test_add_returns_new_list():
    lst = List.of(Num(1))
    assert lst.add(Num(2)) == List.of(Num(1), Num(2))
    assert lst == List.of(Num(1))


def test_atoms_have_no_children():
    with pytest.raises(NoChildren):
        Num(1).len()
    with pytest.raises(NoChildren):
        List().pop(0)


def test_as_num_and_as_bool():
    assert Num(7).as_num() == 7
    assert Bool(False).as_bool() is False
    with pytest.raises(NotANumber):
        Float(1.0).as_num()
    with pytest.raises(WrongType) as info:
        Num(1).as_bool()
    assert info.value.expected == "bool"
    assert info.value.received == "1"


def test_num_promotes_outside_int64():
    assert num(2 ** 63 - 1) == Num(2 ** 63 - 1)
    assert num(2 ** 63) == Float(2.0 ** 63)


@pytest.mark.parametrize(
    "obj, expected",
    [
        (True, Bool(True)),
        (3, Num(3)),
        (2.5, Float(2.5)),
        (dt.time(7, 0), Time(dt.time(7, 0))),
        (dt.date(2024, 1, 2), Date(dt.date(2024, 1, 2))),
        (dt.datetime(2024, 1, 2, 3, 4), DateTime(dt.datetime(2024, 1, 2, 3, 4))),
        ([1, 2.0], List.of(Num(1), Float(2.0))),
        (Num(5), Num(5)),
    ]
)
def test_from_python(obj, expected):
    assert from_python(obj) == expected
    if not isinstance(obj, Num):
        assert to_python(expected) == obj


def test_from_python_rejects_strings():
    with pytest.raises(WrongType):
        from_python("hot")
