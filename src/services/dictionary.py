"""
Static cooking vocabulary used as the last translation fallback.

Tables are keyed by language pair ("en-am", "am-en") and exposed read-only.
"""
from __future__ import annotations

import re
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

_EN_AM = {
    # Ingredients
    "salt": "ጨው",
    "sugar": "ስኳር",
    "water": "ውሃ",
    "oil": "ዘይት",
    "butter": "ቅቤ",
    "flour": "ዱቄት",
    "egg": "እንቁላል",
    "eggs": "እንቁላል",
    "milk": "ወተት",
    "bread": "ዳቦ",
    "rice": "ሩዝ",
    "meat": "ስጋ",
    "chicken": "ዶሮ",
    "fish": "ዓሣ",
    "vegetable": "አትክልት",
    "vegetables": "አትክልቶች",
    "fruit": "ፍራፍሬ",
    "fruits": "ፍራፍሬዎች",
    "spice": "ቅመም",
    "spices": "ቅመሞች",
    "pepper": "በርበሬ",
    "onion": "ሽንኩርት",
    "onions": "ሽንኩርት",
    "garlic": "ነጭ ሽንኩርት",
    "tomato": "ቲማቲም",
    "tomatoes": "ቲማቲም",
    "potato": "ድንች",
    "potatoes": "ድንች",
    "carrot": "ካሮት",
    "carrots": "ካሮት",
    # Cooking verbs
    "mix": "ቀላቀል",
    "stir": "ቀላቀል",
    "cook": "ማብሰል",
    "fry": "ማብሰል",
    "boil": "ማፍላት",
    "bake": "ማብሰል",
    "grill": "ማጠፍ",
    "roast": "ማጠፍ",
    "serve": "ማቅረብ",
    "add": "ጨምር",
    "cut": "ቁረጥ",
    "chop": "ቁረጥ",
    "slice": "ቁረጥ",
    "peel": "ለጣጥል",
    # Measurements
    "cup": "ጽዋ",
    "cups": "ጽዋዎች",
    "teaspoon": "ሻይ ማንኪያ",
    "tablespoon": "የምግብ ማንኪያ",
    "gram": "ግራም",
    "kilo": "ኪሎ",
    "liter": "ሊትር",
    "milliliter": "ሚሊ ሊትር",
    # Sequencing
    "first": "መጀመሪያ",
    "then": "ከዚያ",
    "next": "ቀጥሎ",
    "after": "ከዚያ በኋላ",
    "finally": "በመጨረሻ",
    "now": "አሁን",
    "until": "እስከ",
    "about": "ወደ",
    "minutes": "ደቂቃዎች",
    "hour": "ሰዓት",
    "hours": "ሰዓቶች",
}

_AM_EN = {
    # Ingredients
    "ጨው": "salt",
    "ስኳር": "sugar",
    "ውሃ": "water",
    "ዘይት": "oil",
    "ቅቤ": "butter",
    "ዱቄት": "flour",
    "እንቁላል": "egg",
    "ወተት": "milk",
    "ዳቦ": "bread",
    "ሩዝ": "rice",
    "ስጋ": "meat",
    "ዶሮ": "chicken",
    "ዓሣ": "fish",
    "አትክልት": "vegetable",
    "አትክልቶች": "vegetables",
    "ፍራፍሬ": "fruit",
    "ፍራፍሬዎች": "fruits",
    "ቅመም": "spice",
    "ቅመሞች": "spices",
    "በርበሬ": "pepper",
    "ሽንኩርት": "onion",
    "ነጭ ሽንኩርት": "garlic",
    "ቲማቲም": "tomato",
    "ድንች": "potato",
    "ካሮት": "carrot",
    # Cooking verbs
    "ቀላቀል": "mix",
    "ማብሰል": "cook",
    "ማፍላት": "boil",
    "ማጠፍ": "grill",
    "ማቅረብ": "serve",
    "ጨምር": "add",
    "ቁረጥ": "cut",
    "ለጣጥል": "peel",
    # Sequencing
    "መጀመሪያ": "first",
    "ከዚያ": "then",
    "ቀጥሎ": "next",
    "ከዚያ በኋላ": "after",
    "በመጨረሻ": "finally",
    "አሁን": "now",
    "እስከ": "until",
    "ወደ": "about",
    "ደቂቃዎች": "minutes",
    "ሰዓት": "hour",
    "ሰዓቶች": "hours",
}

COOKING_TERMS: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "en-am": MappingProxyType(_EN_AM),
    "am-en": MappingProxyType(_AM_EN),
})


@lru_cache(maxsize=None)
def _compile(terms: tuple[str, ...]) -> re.Pattern[str]:
    # Longest first so "ነጭ ሽንኩርት" wins over "ሽንኩርት".
    ordered = sorted(terms, key=len, reverse=True)
    alternation = "|".join(re.escape(term) for term in ordered)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


def _mirror_case(source_word: str, replacement: str) -> str:
    if source_word[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def substitute_terms(text: str, table: Mapping[str, str]) -> str:
    """Whole-word, case-insensitive substitution in a single pass."""
    if not text or not table:
        return text

    lookup = {term.casefold(): replacement for term, replacement in table.items()}
    pattern = _compile(tuple(table.keys()))

    def _replace(match: re.Match[str]) -> str:
        word = match.group(0)
        replacement = lookup.get(word.casefold())
        if replacement is None:
            return word
        return _mirror_case(word, replacement)

    return pattern.sub(_replace, text)
