from __future__ import annotations

from axon_parser.tokenizer import split_row, unescape


def test_plain_row():
    assert split_row("1|Alice|alice@example.com") == ["1", "Alice", "alice@example.com"]


def test_quoted_pipe_is_literal():
    assert split_row('1|"a|b"|2') == ["1", "a|b", "2"]


def test_quotes_are_dropped():
    assert split_row('"hello"') == ["hello"]


def test_escaped_pipe_and_quote():
    assert split_row(r"A\|B|say \"hi\"") == ["A|B", 'say "hi"']


def test_escape_table():
    assert split_row(r"a\nb|c\td|e\rf|\\") == ["a\nb", "c\td", "e\rf", "\\"]


def test_unknown_escape_is_literal_char():
    assert split_row(r"\x\y") == ["xy"]


def test_trailing_delimiter_adds_empty_token():
    assert split_row("Hello|") == ["Hello", ""]


def test_empty_middle_token_kept():
    assert split_row("a||b") == ["a", "", "b"]


def test_no_trailing_token_for_empty_buffer():
    # quotes toggle but leave the buffer empty, and there is no trailing "|"
    assert split_row('a|""') == ["a"]


def test_empty_line():
    assert split_row("") == []


def test_unescape_standalone():
    assert unescape(r"a\nb") == "a\nb"
    assert unescape('keep "quotes"') == 'keep "quotes"'
    assert unescape(r"C:\\Users") == "C:\\Users"
