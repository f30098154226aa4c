import pytest

from pushswap import strings


@pytest.mark.parametrize("number", [0, 1, -1, 42, -42, 2147483647, -2147483648, 1000000])
def test_itoa_atoi_round_trip(number):
    assert strings.atoi(strings.itoa(number)) == number


def test_itoa_limits():
    assert strings.itoa(-2147483648) == "-2147483648"
    assert strings.itoa(2147483647) == "2147483647"


def test_atoi_skips_white_space_and_reads_sign():
    assert strings.atoi(" \t\n -42") == -42
    assert strings.atoi("+17") == 17


def test_atoi_stops_at_non_digit():
    assert strings.atoi("123abc456") == 123
    assert strings.atoi("abc") == 0
    assert strings.atoi("-+5") == 0


def test_atoi_leading_zeros():
    assert strings.atoi("010") == 10


def test_split_drops_empty_pieces():
    assert strings.split("  a bb  c ", " ") == ["a", "bb", "c"]
    assert strings.split("", " ") == []
    assert strings.split("   ", " ") == []


def test_split_accepts_character_code():
    assert strings.split("x,y,,z", ord(",")) == ["x", "y", "z"]


@pytest.mark.parametrize("text", ["", "a", "  a  b ", "one two three", "   "])
def test_count_words_matches_split(text):
    assert strings.count_words(text, " ") == len(strings.split(text, " "))


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        strings.split("a b", "ab")


def test_str_chr_and_rchr():
    text = "banana"
    first = strings.str_chr(text, "a")
    last = strings.str_rchr(text, "a")
    assert text[first] == "a" and "a" not in text[:first]
    assert text[last] == "a" and "a" not in text[last + 1:]
    assert strings.str_chr(text, "z") is None
    assert strings.str_rchr(text, "z") is None


def test_str_chr_nul_finds_end():
    assert strings.str_chr("abc", "\0") == len("abc")
    assert strings.str_rchr("abc", 0) == len("abc")


def test_str_dup_and_join():
    assert strings.str_dup("hello") == "hello"
    assert strings.str_join("abc", "def") == "abcdef"
    assert strings.str_join("", "") == ""


def test_str_len():
    assert strings.str_len("sssss") == len("sssss")
    assert strings.str_len("") == 0


def test_str_lcpy_truncates_and_reports_source_length():
    result, total = strings.str_lcpy("old", "hello", 3)
    assert result == "he"
    assert total == len("hello")


def test_str_lcpy_size_zero_leaves_dest():
    assert strings.str_lcpy("old", "hello", 0) == ("old", len("hello"))


def test_str_lcpy_large_size_copies_all():
    assert strings.str_lcpy("", "hello", 100) == ("hello", len("hello"))


def test_str_lcat_appends_within_size():
    result, total = strings.str_lcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_str_lcat_small_size_keeps_dest():
    result, total = strings.str_lcat("abc", "de", 2)
    assert result == "abc"
    assert total == 2 + len("de")


def test_str_mapi():
    assert strings.str_mapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strings.str_mapi("aaa", lambda i, c: str(i)) == "012"


def test_str_iteri_replaces_in_place():
    chars = list("abc")
    strings.str_iteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C"]


def test_str_ncmp():
    assert strings.str_ncmp("abc", "abc", 3) == 0
    assert strings.str_ncmp("abc", "abd", 2) == 0
    assert strings.str_ncmp("abc", "abd", 3) < 0
    assert strings.str_ncmp("asdk", "asd", 4) == ord("k")
    assert strings.str_ncmp("anything", "else", 0) == 0


def test_str_ncmp_is_antisymmetric():
    assert strings.str_ncmp("abz", "aby", 5) == -strings.str_ncmp("aby", "abz", 5)


def test_str_nstr():
    haystack = "aaabcabcd"
    pos = strings.str_nstr(haystack, "aabc", len(haystack))
    assert haystack[pos:pos + 4] == "aabc"
    assert strings.str_nstr(haystack, "abcd", 5) is None
    assert strings.str_nstr("", "", 100) == 0
    assert strings.str_nstr(haystack, "xyz", len(haystack)) is None


def test_str_nstr_rejects_negative_length():
    with pytest.raises(ValueError):
        strings.str_nstr("abc", "a", -1)


def test_str_trim():
    assert strings.str_trim("xxhixyx", "xy") == "hi"
    assert strings.str_trim("xxxx", "x") == ""
    assert strings.str_trim(" a ", "") == " a "


def test_substr():
    assert strings.substr("hello", 1, 3) == "ell"
    assert strings.substr("hello", 10, 3) == ""
    assert strings.substr("hello", 2, 100) == "llo"


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        strings.substr("hello", -1, 2)