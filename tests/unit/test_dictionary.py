from __future__ import annotations

import pytest

from src.services.dictionary import COOKING_TERMS, substitute_terms


class TestCookingTerms:
    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            COOKING_TERMS["en-am"]["salt"] = "x"  # type: ignore[index]

    def test_both_directions_present(self) -> None:
        assert COOKING_TERMS["en-am"]["salt"] == "ጨው"
        assert COOKING_TERMS["am-en"]["ጨው"] == "salt"

    def test_sugar_and_onion_are_distinct(self) -> None:
        assert COOKING_TERMS["en-am"]["sugar"] != COOKING_TERMS["en-am"]["onion"]
        assert COOKING_TERMS["am-en"]["ሽንኩርት"] == "onion"
        assert COOKING_TERMS["am-en"]["ስኳር"] == "sugar"


class TestSubstituteTerms:
    def test_whole_word_substitution(self) -> None:
        result = substitute_terms("add salt and water", COOKING_TERMS["en-am"])
        assert result == "ጨምር ጨው and ውሃ"

    def test_case_insensitive_match(self) -> None:
        assert substitute_terms("SALT", COOKING_TERMS["en-am"]) == "ጨው"

    def test_partial_words_are_not_replaced(self) -> None:
        assert substitute_terms("salty", COOKING_TERMS["en-am"]) == "salty"

    def test_capitalized_source_capitalizes_replacement(self) -> None:
        assert substitute_terms("Water boils", {"water": "agua"}) == "Agua boils"

    def test_lowercase_source_keeps_replacement_case(self) -> None:
        assert substitute_terms("boil water", {"water": "agua"}) == "boil agua"

    def test_amharic_to_english(self) -> None:
        assert substitute_terms("ጨው", COOKING_TERMS["am-en"]) == "salt"

    def test_multi_word_term_wins_over_prefix(self) -> None:
        result = substitute_terms("ነጭ ሽንኩርት", COOKING_TERMS["am-en"])
        assert result == "garlic"

    def test_replacements_are_not_substituted_again(self) -> None:
        table = {"salt": "pepper", "pepper": "salt"}
        assert substitute_terms("salt pepper", table) == "pepper salt"

    def test_no_match_returns_input(self) -> None:
        assert substitute_terms("injera", COOKING_TERMS["en-am"]) == "injera"

    def test_empty_text(self) -> None:
        assert substitute_terms("", COOKING_TERMS["en-am"]) == ""
