import pytest

from dsakit.string_dictionary import StringDictionary


@pytest.fixture
def fruits():
    d = StringDictionary()
    d.insert("Banana", "Long fruit")
    d.insert("Apple", "Round fruit")
    d.insert("Peach", "Soft fruit")
    return d


@pytest.mark.parametrize(
    "key, value",
    [("Banana", "Long fruit"), ("Apple", "Round fruit"), ("Peach", "Soft fruit")],
)
def test_search_found(fruits, key, value):
    assert fruits.search(key) == value


def test_search_missing_raises(fruits):
    with pytest.raises(KeyError):
        fruits.search("Cherry")


def test_search_is_case_sensitive(fruits):
    with pytest.raises(KeyError):
        fruits.search("banana")


def test_duplicate_keeps_first_value(fruits):
    fruits.insert("Apple", "Other")
    assert fruits.search("Apple") == "Round fruit"


def test_empty_dictionary_raises():
    with pytest.raises(KeyError):
        StringDictionary().search("anything")