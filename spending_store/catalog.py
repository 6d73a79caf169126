from types import MappingProxyType

from .models import Category, CategoryIcon


CATEGORIES: tuple[Category, ...] = (
    Category(id=1, name="Education", icon="education", icon_bg="#46BDC6"),
    Category(id=2, name="Entertainment", icon="entertainment", icon_bg="#FF8301"),
    Category(id=3, name="Food", icon="food", icon_bg="#213B80"),
    Category(id=4, name="Groceries", icon="groceries", icon_bg="#00BC38"),
    Category(id=5, name="Healthcare", icon="healthcare", icon_bg="#AD3B9B"),
    Category(id=6, name="Housing", icon="housing", icon_bg="#FF373C"),
    Category(id=7, name="Miscellaneous", icon="miscellaneous", icon_bg="#B0866D"),
    Category(id=8, name="Office", icon="office", icon_bg="#E4759D"),
    Category(id=9, name="Pets", icon="pets", icon_bg="#783F05"),
    Category(id=10, name="Shopping", icon="shopping", icon_bg="#386BBC"),
    Category(id=11, name="Subscriptions", icon="subscriptions", icon_bg="#4F7F88"),
    Category(id=12, name="Transportation", icon="transportation", icon_bg="#FFB900"),
    Category(id=13, name="Travel", icon="travel", icon_bg="#8E7CC3"),
    Category(id=14, name="Utilities", icon="utilities", icon_bg="#009EDF"),
)

_IMG = "/src/assets/img"

CATEGORY_ICONS = MappingProxyType(
    {
        "food": CategoryIcon(f"{_IMG}/food-icon-white.png", "Food category icon"),
        "entertainment": CategoryIcon(
            f"{_IMG}/entertainment-icon.png", "Entertainment category icon"
        ),
        "education": CategoryIcon(
            f"{_IMG}/education-icon-white.png", "Education category icon"
        ),
        "groceries": CategoryIcon(
            f"{_IMG}/groceries-icon-white.png", "Groceries category icon"
        ),
        "healthcare": CategoryIcon(
            f"{_IMG}/healthcare-icon-white.png", "Healthcare category icon"
        ),
        "housing": CategoryIcon(
            f"{_IMG}/housing-icon-white.png", "Housing category icon"
        ),
        "miscellaneous": CategoryIcon(
            f"{_IMG}/misc-icon-white.png", "Miscellaneous category icon"
        ),
        "office": CategoryIcon(f"{_IMG}/office-icon-white.png", "Office category icon"),
        "pets": CategoryIcon(f"{_IMG}/pets-icon-white.png", "Pet category icon"),
        "shopping": CategoryIcon(
            f"{_IMG}/shopping-icon-white.png", "Shopping category icon"
        ),
        "subscriptions": CategoryIcon(
            f"{_IMG}/subscriptions-icon-white.png", "Subscriptions category icon"
        ),
        "transportation": CategoryIcon(
            f"{_IMG}/transportation-icon-white.png", "Transportation category icon"
        ),
        "travel": CategoryIcon(f"{_IMG}/travel-icon-white.png", "Travel category icon"),
        "utilities": CategoryIcon(
            f"{_IMG}/utilities-icon-white.png", "Utilities category icon"
        ),
    }
)

_BY_ID = {category.id: category for category in CATEGORIES}
_BY_NAME = {category.name: category for category in CATEGORIES}


def get_category(category_id) -> Category | None:
    # True == 1 in Python; a bool is never a category id.
    if isinstance(category_id, bool) or not isinstance(category_id, int):
        return None
    return _BY_ID.get(category_id)


def get_category_by_name(name: str) -> Category | None:
    return _BY_NAME.get(name)
