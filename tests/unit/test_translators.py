from __future__ import annotations

import asyncio
from typing import Callable

import httpx
import pytest

from src.services.errors import InvalidTranslationResult, NetworkTimeoutError, TranslationServiceError
from src.services.translators import (
    DictionaryStrategy,
    GoogleTranslateStrategy,
    MyMemoryStrategy,
    TranslationStrategy,
    default_strategies,
    validate_translation,
)
from src.services.types import LanguagePair

EN_AM = LanguagePair.from_source("en")
AM_EN = LanguagePair.from_source("am")

Handler = Callable[[httpx.Request], httpx.Response]


def run_attempt(
    factory: Callable[[httpx.AsyncClient], TranslationStrategy],
    handler: Handler,
    text: str,
    pair: LanguagePair = EN_AM,
) -> str:
    async def _run() -> str:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await factory(client).attempt(text, pair)

    return asyncio.run(_run())


def mymemory_payload(text: str, status: object = 200) -> dict:
    return {"responseStatus": status, "responseData": {"translatedText": text}}


class TestValidateTranslation:
    def test_accepts_and_strips(self) -> None:
        assert validate_translation("salt", "  ጨው ") == "ጨው"

    @pytest.mark.parametrize("candidate", ("", "   ", "undefined", "null", None, 12))
    def test_rejects_invalid_values(self, candidate: object) -> None:
        with pytest.raises(InvalidTranslationResult):
            validate_translation("salt", candidate)

    def test_rejects_echo(self) -> None:
        with pytest.raises(InvalidTranslationResult) as excinfo:
            validate_translation("Salt", " Salt")
        assert excinfo.value.reason == "identical to input"


class TestLanguagePair:
    def test_codes(self) -> None:
        assert EN_AM.code == "en|am"
        assert EN_AM.key == "en-am"
        assert AM_EN.code == "am|en"
        assert AM_EN.target == "en"


class TestMyMemoryStrategy:
    def test_successful_translation(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=mymemory_payload("ጨው"))

        result = run_attempt(lambda client: MyMemoryStrategy(client), handler, "salt")

        assert result == "ጨው"
        assert seen[0].url.params["q"] == "salt"
        assert seen[0].url.params["langpair"] == "en|am"

    def test_html_entities_are_unescaped(self) -> None:
        handler = lambda request: httpx.Response(200, json=mymemory_payload("mother&#39;s bread"))
        assert run_attempt(lambda c: MyMemoryStrategy(c), handler, "የእናት ዳቦ", AM_EN) == "mother's bread"

    def test_error_status_in_payload(self) -> None:
        handler = lambda request: httpx.Response(200, json=mymemory_payload("QUOTA EXCEEDED", status="403"))
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: MyMemoryStrategy(c), handler, "salt")

    def test_http_error(self) -> None:
        handler = lambda request: httpx.Response(503, text="unavailable")
        with pytest.raises(TranslationServiceError) as excinfo:
            run_attempt(lambda c: MyMemoryStrategy(c), handler, "salt")
        assert "503" in str(excinfo.value)

    def test_malformed_payload(self) -> None:
        handler = lambda request: httpx.Response(200, json=["unexpected"])
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: MyMemoryStrategy(c), handler, "salt")

    def test_invalid_json(self) -> None:
        handler = lambda request: httpx.Response(200, text="<html>")
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: MyMemoryStrategy(c), handler, "salt")

    def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(NetworkTimeoutError) as excinfo:
            run_attempt(lambda c: MyMemoryStrategy(c, timeout=2.5), handler, "salt")
        assert excinfo.value.timeout_seconds == 2.5

    def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: MyMemoryStrategy(c), handler, "salt")

    def test_oversized_query_is_a_service_error(self) -> None:
        sent: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return httpx.Response(200, json=mymemory_payload("salt"))

        long_text = " ".join(["ጨው"] * 8000)
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: MyMemoryStrategy(c), handler, long_text, AM_EN)
        assert sent == []


class TestGoogleTranslateStrategy:
    def test_joins_sentence_segments(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            payload = [[["Boil water. ", "ውሃ አፍላ። ", None], ["Add salt.", "ጨው ጨምር።", None]], None, "am"]
            return httpx.Response(200, json=payload)

        result = run_attempt(lambda c: GoogleTranslateStrategy(c), handler, "ውሃ አፍላ። ጨው ጨምር።", AM_EN)

        assert result == "Boil water. Add salt."
        params = seen[0].url.params
        assert params["sl"] == "am"
        assert params["tl"] == "en"
        assert params["client"] == "gtx"

    def test_unexpected_format(self) -> None:
        handler = lambda request: httpx.Response(200, json={"error": "nope"})
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: GoogleTranslateStrategy(c), handler, "salt")

    def test_empty_segments(self) -> None:
        handler = lambda request: httpx.Response(200, json=[[]])
        with pytest.raises(TranslationServiceError):
            run_attempt(lambda c: GoogleTranslateStrategy(c), handler, "salt")


class TestDictionaryStrategy:
    def test_substitutes_known_terms(self) -> None:
        strategy = DictionaryStrategy()
        assert asyncio.run(strategy.attempt("salt", EN_AM)) == "ጨው"

    def test_unknown_text_is_returned_unchanged(self) -> None:
        strategy = DictionaryStrategy()
        assert asyncio.run(strategy.attempt("injera", EN_AM)) == "injera"

    def test_missing_table(self) -> None:
        strategy = DictionaryStrategy(tables={})
        with pytest.raises(TranslationServiceError):
            asyncio.run(strategy.attempt("salt", EN_AM))


class TestDefaultStrategies:
    def test_order(self) -> None:
        async def _names() -> list[str]:
            async with httpx.AsyncClient() as client:
                return [strategy.name for strategy in default_strategies(client)]

        assert asyncio.run(_names()) == ["mymemory", "google", "dictionary"]
