from os.path import dirname, join

from completiontools import Autocompleter, load_autocompleter
from completiontools import EMPTY, MISSING, COMPLETE, PARTIAL
from completiontools import build_tree

top = join(dirname(__file__), "data")

WORDS = join(top, "words.txt")
WORDS_MESSY = join(top, "words_messy.txt")


def make_autocompleter(**kwargs):
    tree = build_tree(["cat", "car", "cats", "dog"])
    return Autocompleter(tree, **kwargs)


def test_typing_a_word():
    autocompleter = make_autocompleter()
    assert autocompleter.status() == EMPTY
    assert autocompleter.suggestions() == []

    autocompleter.append("c")
    assert autocompleter.status() == PARTIAL
    autocompleter.append("a")
    assert autocompleter.suggestions() == ["cat", "car", "cats"]

    autocompleter.append("t")
    assert autocompleter.is_word()
    assert autocompleter.status() == PARTIAL
    assert autocompleter.suggestions() == ["cats"]

    autocompleter.append("s")
    assert autocompleter.status() == COMPLETE
    assert autocompleter.suggestions() == []

    autocompleter.append("x")
    assert autocompleter.status() == MISSING
    assert autocompleter.suggestions() is None
    assert not autocompleter.is_word()

    autocompleter.backspace()
    assert str(autocompleter.query) == "cats"
    assert autocompleter.status() == COMPLETE


def test_backspace_on_empty_query():
    autocompleter = make_autocompleter()
    autocompleter.backspace()
    assert str(autocompleter.query) == ""
    assert autocompleter.status() == EMPTY


def test_sorted_suggestions():
    autocompleter = make_autocompleter(sort=True)
    autocompleter.set_query("ca")
    assert autocompleter.suggestions() == ["car", "cat", "cats"]


def test_limited_suggestions():
    autocompleter = make_autocompleter(limit=2)
    autocompleter.set_query("ca")
    assert autocompleter.suggestions() == ["cat", "car"]

    autocompleter = make_autocompleter(limit=2, sort=True)
    autocompleter.set_query("ca")
    assert autocompleter.suggestions() == ["car", "cat"]


def test_best():
    autocompleter = make_autocompleter(sort=True)
    autocompleter.set_query("c")
    assert autocompleter.best() == "car"
    autocompleter.set_query("cats")
    assert autocompleter.best() is None
    autocompleter.set_query("z")
    assert autocompleter.best() is None


def test_set_query_and_clear():
    autocompleter = make_autocompleter()
    autocompleter.set_query("do")
    assert autocompleter.suggestions() == ["dog"]
    autocompleter.set_query("ca")
    assert str(autocompleter.query) == "ca"
    autocompleter.clear()
    assert autocompleter.status() == EMPTY


def test_lower():
    autocompleter = make_autocompleter(lower=True)
    autocompleter.append("CA")
    assert str(autocompleter.query) == "ca"
    assert autocompleter.status() == PARTIAL


def test_lower_expanding_character():
    autocompleter = make_autocompleter(lower=True)
    autocompleter.append("İ")
    assert str(autocompleter.query) == "İ".lower()
    assert len(autocompleter.query) == 2
    assert autocompleter.status() == MISSING


def test_train_and_insert():
    autocompleter = Autocompleter()
    assert len(autocompleter) == 0
    autocompleter.train(["cat", "car"])
    autocompleter.insert("cats")
    assert len(autocompleter) == 3
    assert "cats" in autocompleter
    assert "ca" not in autocompleter


def test_load_autocompleter():
    autocompleter = load_autocompleter(WORDS, sort=True)
    autocompleter.set_query("do")
    assert autocompleter.is_word()
    assert autocompleter.suggestions() == ["dog", "dogs"]


def test_load_autocompleter_lower():
    autocompleter = load_autocompleter(WORDS_MESSY, lower=True,
                                       skip_comments="#")
    autocompleter.set_query("CA")
    assert sorted(autocompleter.suggestions()) == ["car", "cat", "cats"]
    assert autocompleter.lower
