import pytest

from minish import textops


def test_split_drops_empty_pieces():
    assert textops.split(",,a,,bc,", ",") == ["a", "bc"]


def test_split_none_and_only_separators():
    assert textops.split(None, ":") == []
    assert textops.split(":::", ":") == []


def test_split_path_like():
    assert textops.split("/usr/bin:/bin", ":") == ["/usr/bin", "/bin"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        textops.split("a b", "ab")


def test_split_rejoin_round_trip():
    parts = textops.split("x y z", " ")
    assert " ".join(parts) == "x y z"


def test_split_charset_many_separators():
    assert textops.split_charset("a+b.c;;d", "+.;") == ["a", "b", "c", "d"]


def test_split_charset_empty_charset_keeps_whole():
    assert textops.split_charset("abc", "") == ["abc"]
    assert textops.split_charset(None, ",") == []


def test_split_charset_pieces_have_no_separators():
    pieces = textops.split_charset("--a:b--c:", "-:")
    assert all("-" not in p and ":" not in p for p in pieces)
    assert "".join(pieces) == "abc"


def test_trim_both_ends():
    assert textops.trim("xxhixyx", "xy") == "hi"


def test_trim_empty_set_and_all_trimmed():
    assert textops.trim("  a  ", "") == "  a  "
    assert textops.trim("aaaa", "a") == ""


def test_substr_basic_and_beyond_end():
    assert textops.substr("hello", 1, 3) == "ell"
    assert textops.substr("hello", 10, 3) == ""
    assert textops.substr("hello", 3, 100) == "lo"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        textops.substr("abc", -1, 2)


def test_find_bounded():
    assert textops.find_bounded("foo bar baz", "bar", 11) == 4
    assert textops.find_bounded("foo bar baz", "bar", 6) is None
    assert textops.find_bounded("abc", "", 0) == 0


def test_find_bounded_exact_limit():
    assert textops.find_bounded("foo bar", "bar", 7) == 4


def test_compare_prefix_equal_within_n():
    assert textops.compare_prefix("PATH=x", "PATH", 4) == 0
    assert textops.compare_prefix("abc", "abd", 2) == 0


def test_compare_prefix_sign():
    assert textops.compare_prefix("abc", "abd", 3) < 0
    assert textops.compare_prefix("abd", "abc", 3) > 0
    assert textops.compare_prefix("ab", "abc", 5) < 0


def test_compare_prefix_antisymmetric():
    a, b = "hello", "help"
    assert textops.compare_prefix(a, b, 5) == -textops.compare_prefix(b, a, 5)


def test_index_of():
    assert textops.index_of("banana", "n") == 2
    assert textops.index_of("banana", "z") is None
    assert textops.index_of("banana", "\0") == len("banana")


def test_rindex_of():
    assert textops.rindex_of("banana", "n") == 4
    assert textops.rindex_of("banana", "z") is None
    assert textops.rindex_of("abc", "\0") == len("abc")


def test_map_indexed():
    result = textops.map_indexed("abcd", lambda i, c: c.upper() if i % 2 else c)
    assert result == "aBcD"


def test_bounded_copy():
    assert textops.bounded_copy("hello", 3) == ("he", 5)
    assert textops.bounded_copy("hi", 10) == ("hi", 2)
    assert textops.bounded_copy("hi", 0) == ("", 2)


def test_bounded_concat_fits():
    assert textops.bounded_concat("foo", "bar", 10) == ("foobar", 6)


def test_bounded_concat_truncates():
    text, total = textops.bounded_concat("foo", "bar", 5)
    assert text == "foob"
    assert total == len("foobar")


def test_bounded_concat_dst_fills_buffer():
    assert textops.bounded_concat("foobar", "xy", 3) == ("foobar", 5)
    assert textops.bounded_concat("", "abc", 0) == ("", 3)