import pytest

from ncspot.category import Category


def test_from_api():
    category = Category.from_api({"id": "chill", "name": "Chill", "icons": []})
    assert category == Category(id="chill", name="Chill")


def test_str_is_name():
    assert str(Category(id="pop", name="Pop")) == "Pop"


def test_share_url():
    assert Category(id="pop", name="Pop").share_url() == "https://open.spotify.com/genre/pop"


def test_missing_field_raises():
    with pytest.raises(KeyError):
        Category.from_api({"id": "pop"})