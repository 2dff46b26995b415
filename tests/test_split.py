import pytest

from tabline.split import (
    ends_with_whitespace,
    last_word_start,
    quote_word,
    split,
    starts_new_word,
)


def test_split_double_quotes():
    assert split('"A B C"') == ["A B C"]


def test_split_single_quotes():
    assert split("'A B C'") == ["A B C"]


def test_split_backslash_escapes_whitespace():
    assert split("A\\ B C") == ["A B", "C"]


def test_split_mixed_escaping():
    assert split("A \"'\" B  '\"' \\\\ C") == ["A", "'", "B", '"', "\\", "C"]


def test_split_backslash_is_literal_inside_quotes():
    assert split('"C:\\dir"') == ["C:\\dir"]
    assert split("'C:\\dir'") == ["C:\\dir"]


def test_split_quotes_join_adjacent_text():
    assert split('say"hello world"!') == ["sayhello world!"]


@pytest.mark.parametrize("line", ["", " ", "   ", "\t \t", "\n"])
def test_split_blank_input_yields_no_words(line):
    assert split(line) == []


@pytest.mark.parametrize(
    "line, expected",
    [
        ("  print   a  ", ["print", "a"]),
        ("\tprint\ta\t", ["print", "a"]),
        ("print", ["print"]),
    ],
)
def test_split_never_produces_empty_words(line, expected):
    words = split(line)
    assert words == expected
    assert all(words)


def test_split_empty_quotes_produce_no_word():
    assert split('a "" b') == ["a", "b"]


@pytest.mark.parametrize(
    "line",
    ["print out example", "  a   b c  ", "cat --help -n 5", "x\ty\nz"],
)
def test_split_is_idempotent_without_quotes(line):
    words = split(line)
    assert split(" ".join(words)) == words


def test_split_unterminated_quote_keeps_collected_text():
    assert split('echo "unterminated value') == ["echo", "unterminated value"]


def test_split_trailing_backslash_is_dropped():
    assert split("echo foo\\") == ["echo", "foo"]


def test_split_escaped_quotes_inside_other_quotes():
    assert split("'say \"hi\"'") == ['say "hi"']
    assert split("\"it's\"") == ["it's"]


def test_ends_with_whitespace():
    assert ends_with_whitespace("cat ")
    assert not ends_with_whitespace("cat")
    assert not ends_with_whitespace("")


def test_starts_new_word_ignores_escaped_whitespace():
    assert starts_new_word("cat ")
    assert not starts_new_word("cat")
    assert not starts_new_word("cat foo\\ ")
    assert not starts_new_word('cat "foo ')
    assert starts_new_word('cat "foo" ')


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("ca", 0),
        ("cat ", 4),
        ("cat --h", 4),
        ('echo "a b', 5),
        ("echo a\\ b", 5),
        ("  x", 2),
    ],
)
def test_last_word_start(text, expected):
    assert last_word_start(text) == expected


@pytest.mark.parametrize(
    "word",
    ["plain", "New York", "it's", 'say "hi"', "back\\slash", "tab\there", "mix 'a' \"b\""],
)
def test_quote_word_splits_back_to_itself(word):
    assert split(quote_word(word)) == [word]


def test_quote_word_leaves_plain_words_alone():
    assert quote_word("--help") == "--help"
    assert quote_word("New York") == '"New York"'
