import pytest

from algobox.ciphers.rotation import another_rot13, caesar, rot13


def test_another_rot13_simple():
    assert another_rot13("ABCzyx") == "NOPmlk"


def test_another_rot13_every_alphabet_with_space():
    assert (
        another_rot13("The quick brown fox jumps over the lazy dog")
        == "Gur dhvpx oebja sbk whzcf bire gur ynml qbt"
    )


def test_another_rot13_non_alphabet():
    assert another_rot13("🎃 Jack-o'-lantern") == "🎃 Wnpx-b'-ynagrea"


def test_another_rot13_is_an_involution():
    text = "Hello, World! 123"
    assert another_rot13(another_rot13(text)) == text


def test_caesar_empty():
    assert caesar("", 13) == ""


def test_caesar_rot_13():
    assert caesar("rust", 13) == "ehfg"


def test_caesar_unicode():
    assert caesar("attack at dawn 攻", 5) == "fyyfhp fy ifbs 攻"


def test_caesar_keeps_case():
    assert caesar("XyZ", 3) == "AbC"


@pytest.mark.parametrize(
    "text, expected",
    [("A", "N"), ("ABC", "NOP"), ("😀AB", "😀NO")],
)
def test_rot13(text, expected):
    assert rot13(text) == expected


def test_rot13_twice():
    assert rot13(rot13("ABCD")) == "ABCD"


def test_rot13_uppercases():
    assert rot13("abc") == "NOP"