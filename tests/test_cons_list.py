from rustdrill.drills.cons_list import (
    Cons,
    Nil,
    create_empty_list,
    create_non_empty_list,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty != create_empty_list()
    assert isinstance(non_empty, Cons)
    assert non_empty.rest == Nil()


def test_non_empty_list_value():
    assert create_non_empty_list() == Cons(1, Nil())