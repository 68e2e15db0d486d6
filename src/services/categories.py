from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .types import Language


@dataclass(frozen=True)
class Category:
    en: str
    am: str

    def name(self, language: Language) -> str:
        return self.en if language == "en" else self.am

    def matches(self, text: str) -> bool:
        needle = text.strip().casefold()
        return needle in (self.en.casefold(), self.am.casefold())


CATEGORIES: tuple[Category, ...] = (
    Category(en="Breakfast", am="እራት ጠዋት"),
    Category(en="Lunch", am="እራት ቀን"),
    Category(en="Dinner", am="እራት ማታ"),
    Category(en="Dessert", am="ምርጥ ምግብ"),
    Category(en="Drinks", am="መጠጦች"),
    Category(en="Vegetarian", am="አትክልት ምግብ"),
    Category(en="Meat", am="ስጋ ምግብ"),
    Category(en="Appetizer", am="መግቢያ ምግብ"),
    Category(en="Soup", am="ሾርባ"),
    Category(en="Salad", am="ሰላጣ"),
    Category(en="Bread", am="ዳቦ"),
    Category(en="Rice", am="ሩዝ"),
    Category(en="Pasta", am="ፓስታ"),
    Category(en="Seafood", am="የባሕር ምግብ"),
    Category(en="Vegan", am="ቬጋን"),
)


def find_category(text: str, categories: tuple[Category, ...] = CATEGORIES) -> Optional[Category]:
    if not text or not text.strip():
        return None
    for category in categories:
        if category.matches(text):
            return category
    return None


def category_names(language: Language, categories: tuple[Category, ...] = CATEGORIES) -> list[str]:
    return [category.name(language) for category in categories]
