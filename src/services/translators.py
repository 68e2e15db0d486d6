from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

from .dictionary import COOKING_TERMS, substitute_terms
from .errors import InvalidTranslationResult, NetworkTimeoutError, TranslationServiceError
from .types import LanguagePair

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
MYMEMORY_API_URL = "https://api.mymemory.translated.net/get"
GOOGLE_TRANSLATE_URL = "https://translate.googleapis.com/translate_a/single"
REJECTED_LITERALS = frozenset({"undefined", "null"})


def validate_translation(source: str, candidate: object) -> str:
    if not isinstance(candidate, str):
        raise InvalidTranslationResult(candidate, "not a string")
    stripped = candidate.strip()
    if not stripped:
        raise InvalidTranslationResult(candidate, "empty")
    if stripped in REJECTED_LITERALS:
        raise InvalidTranslationResult(candidate, "null sentinel")
    if stripped == source.strip():
        raise InvalidTranslationResult(candidate, "identical to input")
    return stripped


async def _get_json(
    client: httpx.AsyncClient,
    url: str,
    params: Mapping[str, str],
    timeout: float,
) -> Any:
    try:
        response = await client.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except httpx.TimeoutException as error:
        raise NetworkTimeoutError(url, timeout) from error
    except httpx.HTTPStatusError as error:
        raise TranslationServiceError(f"HTTP {error.response.status_code} from {url}") from error
    except httpx.HTTPError as error:
        raise TranslationServiceError(f"Network error calling {url}: {error}") from error
    except httpx.InvalidURL as error:
        # Raised before sending, e.g. when a long field overflows the query string.
        raise TranslationServiceError(f"Request to {url} rejected: {error}") from error
    except ValueError as error:
        raise TranslationServiceError(f"Invalid JSON from {url}") from error


class TranslationStrategy(ABC):
    """One step of the fallback chain. Raises ServiceError subclasses on failure."""

    name = "strategy"

    @abstractmethod
    async def attempt(self, text: str, pair: LanguagePair) -> str:
        pass


class MyMemoryStrategy(TranslationStrategy):
    name = "mymemory"

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = MYMEMORY_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self.url = url
        self.timeout = timeout

    async def attempt(self, text: str, pair: LanguagePair) -> str:
        data = await _get_json(
            self._client,
            self.url,
            {"q": text, "langpair": pair.code},
            self.timeout,
        )
        try:
            status = data.get("responseStatus")
            translated = data["responseData"]["translatedText"]
        except (AttributeError, KeyError, TypeError) as error:
            raise TranslationServiceError("MyMemory returned an unexpected payload") from error

        if str(status) != "200" or not translated:
            raise TranslationServiceError(f"MyMemory returned status {status}")
        return html.unescape(str(translated))


class GoogleTranslateStrategy(TranslationStrategy):
    name = "google"

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = GOOGLE_TRANSLATE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._client = client
        self.url = url
        self.timeout = timeout

    async def attempt(self, text: str, pair: LanguagePair) -> str:
        data = await _get_json(
            self._client,
            self.url,
            {"client": "gtx", "sl": pair.source, "tl": pair.target, "dt": "t", "q": text},
            self.timeout,
        )
        try:
            segments = [segment[0] for segment in data[0] if segment and segment[0]]
        except (IndexError, KeyError, TypeError) as error:
            raise TranslationServiceError("Google Translate returned an unexpected payload") from error

        if not segments:
            raise TranslationServiceError("Google Translate returned no segments")
        return "".join(str(segment) for segment in segments)


class DictionaryStrategy(TranslationStrategy):
    name = "dictionary"

    def __init__(self, tables: Mapping[str, Mapping[str, str]] = COOKING_TERMS) -> None:
        self._tables = tables

    async def attempt(self, text: str, pair: LanguagePair) -> str:
        table = self._tables.get(pair.key)
        if not table:
            raise TranslationServiceError(f"No dictionary for {pair.key}")
        return substitute_terms(text, table)


def default_strategies(
    client: httpx.AsyncClient,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    mymemory_url: str = MYMEMORY_API_URL,
    google_url: str = GOOGLE_TRANSLATE_URL,
    tables: Mapping[str, Mapping[str, str]] = COOKING_TERMS,
) -> list[TranslationStrategy]:
    return [
        MyMemoryStrategy(client, url=mymemory_url, timeout=timeout),
        GoogleTranslateStrategy(client, url=google_url, timeout=timeout),
        DictionaryStrategy(tables),
    ]
