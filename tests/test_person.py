import pytest

from rustdrill.drills.person import (
    BadLenError,
    EmptyError,
    NoNameError,
    ParseIntError,
    ParsePersonError,
    Person,
    parse_person,
    person_from,
)

DEFAULT = Person("John", 30)


def test_default():
    dp = Person()
    assert dp.name == "John"
    assert dp.age == 30


@pytest.mark.parametrize(
    "text",
    ["", "Mark,twenty", "Mark", "Mark,", ",1", ",", ",one", "Mark,-1"],
)
def test_bad_input_gives_default(text):
    assert person_from(text) == DEFAULT


def test_good_convert():
    p = person_from("Mark,20")
    assert p.name == "Mark"
    assert p.age == 20


def test_trailing_comma():
    assert person_from("Mike,32,") == Person("Mike", 32)


def test_trailing_comma_and_some_string():
    assert person_from("Mike,32,man") == Person("Mike", 32)


def test_empty_input():
    with pytest.raises(EmptyError):
        parse_person("")


def test_good_input():
    p = parse_person("John,32")
    assert p.name == "John"
    assert p.age == 32


def test_missing_age():
    with pytest.raises(ParseIntError, match="empty string"):
        parse_person("John,")


def test_invalid_age():
    with pytest.raises(ParseIntError, match="invalid digit"):
        parse_person("John,twenty")


def test_negative_age_is_invalid():
    with pytest.raises(ParseIntError, match="invalid digit"):
        parse_person("John,-3")


def test_missing_comma_and_age():
    with pytest.raises(BadLenError):
        parse_person("John")


def test_missing_name():
    with pytest.raises(NoNameError):
        parse_person(",1")


@pytest.mark.parametrize("text", [",", ",one"])
def test_missing_name_and_bad_age(text):
    with pytest.raises((NoNameError, ParseIntError)):
        parse_person(text)


@pytest.mark.parametrize("text", ["John,32,", "John,32,man"])
def test_too_many_fields(text):
    with pytest.raises(BadLenError):
        parse_person(text)


def test_errors_share_a_base():
    with pytest.raises(ParsePersonError):
        parse_person("")