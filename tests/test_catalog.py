import pytest

from spending_store.catalog import (
    CATEGORIES,
    CATEGORY_ICONS,
    get_category,
    get_category_by_name,
)


def test_category_ids_are_unique_and_sequential():
    ids = [category.id for category in CATEGORIES]
    assert ids == list(range(1, 15))


def test_every_category_has_an_icon():
    for category in CATEGORIES:
        icon = CATEGORY_ICONS[category.icon]
        assert icon.src.endswith(".png")
        assert icon.alt


def test_get_category():
    food = get_category(3)
    assert food.name == "Food"
    assert food.icon == "food"
    assert food.icon_bg == "#213B80"
    assert get_category(999) is None
    assert get_category("3") is None
    assert get_category(True) is None


def test_get_category_by_name():
    assert get_category_by_name("Utilities").id == 14
    assert get_category_by_name("utilities") is None


def test_category_icons_are_read_only():
    with pytest.raises(TypeError):
        CATEGORY_ICONS["food"] = None
    assert CATEGORY_ICONS["food"].alt == "Food category icon"
