import pytest

from algobox.data_structures.binary_search_tree import BinarySearchTree

BACK_AWAY = "back away...I will deal with this jedi slime myself"


@pytest.fixture
def memes_tree():
    tree = BinarySearchTree()
    for line in [
        "hello there",
        "general kenobi",
        "you are a bold one",
        "kill him",
        BACK_AWAY,
        "your move",
        "you fool",
    ]:
        tree.insert(line)
    return tree


def test_search(memes_tree):
    assert memes_tree.search("hello there")
    assert memes_tree.search("you are a bold one")
    assert memes_tree.search("general kenobi")
    assert memes_tree.search("you fool")
    assert memes_tree.search("kill him")
    assert not memes_tree.search(
        "but i was going to tosche station to pick up some power converters"
    )
    assert not memes_tree.search("only a sith deals in absolutes")
    assert not memes_tree.search("you underestimate my power")


def test_maximum_and_minimum(memes_tree):
    assert memes_tree.maximum() == "your move"
    assert memes_tree.minimum() == BACK_AWAY

    tree = BinarySearchTree()
    assert tree.maximum() is None
    assert tree.minimum() is None
    tree.insert(0)
    assert tree.minimum() == 0
    assert tree.maximum() == 0
    tree.insert(-5)
    assert tree.minimum() == -5
    assert tree.maximum() == 0
    tree.insert(5)
    assert tree.minimum() == -5
    assert tree.maximum() == 5


def test_floor(memes_tree):
    assert memes_tree.floor("hello there") == "hello there"
    assert memes_tree.floor("these are not the droids you're looking for") == "kill him"
    assert memes_tree.floor("another death star") is None
    assert memes_tree.floor("you fool") == "you fool"
    assert memes_tree.floor("but i was going to tasche station") == BACK_AWAY
    assert memes_tree.floor("you underestimate my power") == "you fool"
    assert memes_tree.floor("your new empire") == "your move"


def test_ceil(memes_tree):
    assert memes_tree.ceil("hello there") == "hello there"
    assert (
        memes_tree.ceil("these are not the droids you're looking for")
        == "you are a bold one"
    )
    assert memes_tree.ceil("another death star") == BACK_AWAY
    assert memes_tree.ceil("you fool") == "you fool"
    assert memes_tree.ceil("but i was going to tasche station") == "general kenobi"
    assert memes_tree.ceil("you underestimate my power") == "your move"
    assert memes_tree.ceil("your new empire") is None


def test_iterator(memes_tree):
    it = iter(memes_tree)
    assert next(it) == BACK_AWAY
    assert next(it) == "general kenobi"
    assert next(it) == "hello there"
    assert next(it) == "kill him"
    assert next(it) == "you are a bold one"
    assert next(it) == "you fool"
    assert next(it) == "your move"
    assert next(it, None) is None
    assert next(it, None) is None


def test_empty_tree():
    tree = BinarySearchTree()
    assert list(tree) == []
    assert not tree.search(1)
    assert tree.floor(1) is None
    assert tree.ceil(1) is None


def test_duplicates_are_kept():
    tree = BinarySearchTree()
    for value in [3, 1, 3, 2, 3]:
        tree.insert(value)
    assert list(tree) == [1, 2, 3, 3, 3]
    assert tree.search(3)