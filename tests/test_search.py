import pytest

from hoptrace.toolkit.search import (
    str_chr,
    str_cmp,
    str_dup,
    str_len,
    str_ncmp,
    str_nstr,
    str_rchr,
)


@pytest.mark.parametrize("text", ["", "a", "traceroute", "with space\t"])
def test_str_len_counts_characters(text):
    assert str_len(text) == len(text)


def test_str_len_rejects_non_string():
    with pytest.raises(TypeError):
        str_len(None)


def test_str_chr_finds_first():
    s = "abcabc"
    index = str_chr(s, "b")
    assert s[index] == "b"
    assert "b" not in s[:index]


def test_str_chr_accepts_code_point():
    s = "hop"
    index = str_chr(s, ord("p"))
    assert s[index] == "p"


def test_str_chr_missing_is_none():
    assert str_chr("abc", "z") is None


def test_str_chr_terminator_is_end():
    s = "host"
    assert str_chr(s, "\0") == len(s)
    assert str_chr(s, 0) == len(s)


def test_str_rchr_finds_last():
    s = "abcabc"
    index = str_rchr(s, "b")
    assert s[index] == "b"
    assert "b" not in s[index + 1:]


def test_str_rchr_missing_and_terminator():
    s = "route"
    assert str_rchr(s, "x") is None
    assert str_rchr(s, "\0") == len(s)


def test_str_nstr_example():
    assert str_nstr("aaabcabcd", "aabc", 100) == 1


def test_str_nstr_empty_needle():
    assert str_nstr("anything", "", 0) == 0


def test_str_nstr_match_lies_within_length():
    big, little = "the quick brown fox", "brown"
    index = str_nstr(big, little, len(big))
    assert big[index:index + len(little)] == little
    assert str_nstr(big, little, index + len(little)) == index
    assert str_nstr(big, little, index + len(little) - 1) is None


def test_str_nstr_not_found():
    assert str_nstr("", "a", 5) is None


def test_str_nstr_rejects_negative_length():
    with pytest.raises(ValueError):
        str_nstr("abc", "a", -1)


def test_str_cmp_equal_strings():
    assert str_cmp("target", "target") == 0
    assert str_cmp("", "") == 0


def test_str_cmp_difference_at_mismatch():
    assert str_cmp("abc", "abd") == ord("c") - ord("d")


def test_str_cmp_shorter_string_counts_as_terminated():
    assert str_cmp("ab", "abc") == -ord("c")
    assert str_cmp("abc", "ab") == ord("c")


def test_str_cmp_is_antisymmetric():
    assert str_cmp("icmp", "udp") == -str_cmp("udp", "icmp")


def test_str_cmp_rejects_none():
    with pytest.raises(TypeError):
        str_cmp(None, "a")


def test_str_ncmp_stops_at_length():
    assert str_ncmp("abcdefgh", "abcdwxyz", 4) == 0
    assert str_ncmp("abcdefgh", "abcdwxyz", 5) == ord("e") - ord("w")


def test_str_ncmp_zero_length():
    assert str_ncmp("a", "b", 0) == 0


def test_str_ncmp_rejects_negative_length():
    with pytest.raises(ValueError):
        str_ncmp("a", "b", -1)


def test_str_dup_returns_equal_string():
    s = "--help"
    assert str_dup(s) == s
    assert str_dup("") == ""


def test_str_dup_rejects_non_string():
    with pytest.raises(TypeError):
        str_dup(42)