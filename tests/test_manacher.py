import pytest

from algobox.strings.manacher import manacher


@pytest.mark.parametrize(
    "text, expected",
    [("babad", "aba"), ("cbbd", "bb"), ("a", "a"), ("", "")],
)
def test_longest_palindrome(text, expected):
    assert manacher(text) == expected


def test_two_distinct_characters():
    assert manacher("ac") in ("a", "c")


def test_result_is_palindrome_substring():
    text = "forgeeksskeegfor"
    result = manacher(text)
    assert result == "geeksskeeg"
    assert result in text
    assert result == result[::-1]