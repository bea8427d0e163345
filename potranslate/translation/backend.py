"""HTTP translation backends."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from ..errors import TranslationError
from ..settings import TranslationSettings

__all__ = ["GoogleTranslator", "Translator"]

logger = logging.getLogger(__name__)


class Translator(Protocol):
    """Anything able to translate one string between two languages."""

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Return ``text`` translated or raise :class:`TranslationError`."""
        ...


class GoogleTranslator:
    """Google Translate client.

    Without an API key the public ``translate_a/single`` endpoint is used;
    with one, the Cloud Translation v2 REST API.
    """

    def __init__(
        self,
        settings: TranslationSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a translator, optionally sharing an existing ``client``."""
        self.settings = settings or TranslationSettings()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(self.settings.timeout),
            headers={"User-Agent": "potranslate"},
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> GoogleTranslator:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate ``text`` from ``source_language`` to ``target_language``."""
        try:
            if self.settings.api_key:
                response = self._client.post(
                    self.settings.cloud_endpoint,
                    params={"key": self.settings.api_key},
                    data={
                        "q": text,
                        "source": source_language,
                        "target": target_language,
                        "format": "text",
                    },
                )
            else:
                response = self._client.get(
                    self.settings.endpoint,
                    params={
                        "client": "gtx",
                        "sl": source_language,
                        "tl": target_language,
                        "dt": "t",
                        "q": text,
                    },
                )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as exc:
            raise TranslationError(text, str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            raise TranslationError(text, "response is not valid JSON") from exc

        if self.settings.api_key:
            result = _cloud_translation(payload)
        else:
            result = _public_translation(payload)
        if not result:
            raise TranslationError(text, "backend returned no translation")
        logger.debug("Translated %r -> %r", text, result)
        return result


def _public_translation(payload: Any) -> str | None:
    """Join the translated segments of a ``translate_a/single`` response."""
    try:
        segments = payload[0]
        return "".join(
            segment[0] for segment in segments if segment and isinstance(segment[0], str)
        )
    except (IndexError, KeyError, TypeError):
        return None


def _cloud_translation(payload: Any) -> str | None:
    try:
        return payload["data"]["translations"][0]["translatedText"]
    except (IndexError, KeyError, TypeError):
        return None
