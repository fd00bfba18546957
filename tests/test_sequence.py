import pytest

from completiontools import SymbolSequence


def test_iteration_restarts():
    word = SymbolSequence("cat")
    assert list(word) == ["c", "a", "t"]
    assert list(word) == ["c", "a", "t"]


def test_independent_iterators():
    word = SymbolSequence("ab")
    first, second = iter(word), iter(word)
    assert next(first) == "a"
    assert next(first) == "b"
    assert next(second) == "a"


def test_append_and_drop_last():
    query = SymbolSequence()
    query.append("c")
    query.append("a")
    assert str(query) == "ca"
    query.drop_last()
    assert str(query) == "c"
    assert len(query) == 1


def test_drop_last_on_empty_is_noop():
    query = SymbolSequence("")
    query.drop_last()
    assert len(query) == 0
    assert str(query) == ""


def test_non_string_symbols():
    numbers = SymbolSequence(iter([3, 1]))
    numbers.append(4)
    assert numbers.value == (3, 1, 4)
    assert list(numbers) == [3, 1, 4]
    assert str(numbers) == "314"
    numbers.drop_last()
    assert numbers.value == (3, 1)


def test_textual_append_takes_single_characters():
    query = SymbolSequence()
    with pytest.raises(TypeError):
        query.append(3)
    with pytest.raises(ValueError):
        query.append("ab")
    with pytest.raises(ValueError):
        query.append("")
    assert str(query) == ""


def test_empty_non_textual_sequence():
    numbers = SymbolSequence(())
    numbers.append(3)
    numbers.append("ab")
    assert numbers.value == (3, "ab")
    assert len(numbers) == 2


def test_equality():
    assert SymbolSequence("cat") == SymbolSequence("cat")
    assert SymbolSequence("cat") != SymbolSequence("car")
    assert SymbolSequence(SymbolSequence("cat")) == SymbolSequence("cat")
    assert SymbolSequence([1, 2]) == SymbolSequence((1, 2))


def test_unhashable():
    with pytest.raises(TypeError):
        hash(SymbolSequence("cat"))
