import pytest

from search_server.errors import ErrorKind, MalformedInputError
from search_server.tokenizer import (
    is_valid_word,
    make_unique_non_empty_strings,
    normalize_stop_words,
    split_into_words,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("fluffy cat fluffy tail", ["fluffy", "cat", "fluffy", "tail"]),
        ("  white   cat  ", ["white", "cat"]),
        ("well-groomed dog", ["well-groomed", "dog"]),
        ("", []),
        ("     ", []),
        ("скворец евгений", ["скворец", "евгений"]),
    ],
)
def test_split_into_words(text, expected):
    assert split_into_words(text) == expected


@pytest.mark.parametrize("text", ["big do\tg", "star\nling", "\x00", "cat \x1f"])
def test_split_into_words_rejects_control_characters(text):
    with pytest.raises(MalformedInputError) as excinfo:
        split_into_words(text)
    assert excinfo.value.kind is ErrorKind.MALFORMED_INPUT


def test_is_valid_word():
    assert is_valid_word("well-groomed")
    assert is_valid_word("")
    assert is_valid_word("~\x7f")
    assert not is_valid_word("wi\tth")
    assert not is_valid_word("\x1f")


def test_make_unique_non_empty_strings():
    assert make_unique_non_empty_strings(["in", "", "in", "and"]) == frozenset({"in", "and"})


def test_make_unique_non_empty_strings_validates_words():
    with pytest.raises(MalformedInputError):
        make_unique_non_empty_strings(["and\t", "in", "with"])


class TestNormalizeStopWords:
    def test_from_string(self):
        assert normalize_stop_words("and in  with and") == frozenset({"and", "in", "with"})

    def test_from_collection(self):
        assert normalize_stop_words({"and", "in", ""}) == frozenset({"and", "in"})

    def test_collection_items_are_not_split(self):
        assert normalize_stop_words(["in with"]) == frozenset({"in with"})

    @pytest.mark.parametrize("stop_words", ["and in wi\tth", ["and\t", "in"]])
    def test_rejects_control_characters(self, stop_words):
        with pytest.raises(MalformedInputError):
            normalize_stop_words(stop_words)
