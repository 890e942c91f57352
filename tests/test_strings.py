import pytest

from rustdrill.drills.strings import compose_me, is_a_color_word, replace_me, trim_me


@pytest.mark.parametrize(
    "text, expected",
    [("Hello!     ", "Hello!"), ("  What's up!", "What's up!"), ("   Hola!  ", "Hola!")],
)
def test_trim_a_string(text, expected):
    assert trim_me(text) == expected


def test_compose_a_string():
    assert compose_me("Hello") == "Hello world!"
    assert compose_me("Goodbye") == "Goodbye world!"


def test_replace_a_string():
    assert replace_me("I think cars are cool") == "I think balloons are cool"
    assert replace_me("I love to look at cars") == "I love to look at balloons"


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_known_color_words(word):
    assert is_a_color_word(word) is True


@pytest.mark.parametrize("word", ["purple", "Green", ""])
def test_unknown_color_words(word):
    assert is_a_color_word(word) is False