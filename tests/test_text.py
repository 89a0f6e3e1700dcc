from shellpipe.text import first_quote_index, has_quotes, sanitize, split_words, strip_quotes, trim


def test_trim_only_strips_spaces_and_tabs():
    assert trim(" \t ls -l\t ") == "ls -l"
    assert trim("ls\n") == "ls\n"
    assert trim("   ") == ""


def test_sanitize_removes_every_listed_char():
    assert sanitize(r"a\b\\c", "\\") == "abc"
    assert sanitize("hello", "lo") == "he"


def test_split_words_collapses_runs_of_whitespace():
    assert split_words("ls \t -l   -a") == ["ls", "-l", "-a"]
    assert split_words("") == []


def test_has_quotes_ignores_escaped_quotes():
    assert has_quotes('"abc')
    assert has_quotes('ab"c')
    assert not has_quotes(r"ab\"c")
    assert not has_quotes("plain")


def test_first_quote_index_skips_escaped_quotes():
    assert first_quote_index('"abc"') == 0
    assert first_quote_index(r'a\"b"c') == 4
    assert first_quote_index("none") == 0


def test_strip_quotes_keeps_escaped_quotes():
    assert strip_quotes('"a b"') == "a b"
    assert strip_quotes(r'say \"hi\"') == r"say \"hi\""
