"""Tests for the Google Translate backend."""

from urllib.parse import parse_qs

import httpx
import pytest

from potranslate.errors import TranslationError
from potranslate.settings import TranslationSettings
from potranslate.translation.backend import GoogleTranslator

pytestmark = pytest.mark.unit


def make_translator(handler, settings: TranslationSettings | None = None) -> GoogleTranslator:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return GoogleTranslator(settings, client=client)


def test_public_endpoint_joins_segments() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json=[[["Hola ", "Hello ", None, None], ["mundo", "world", None, None]], None, "en"],
        )

    translator = make_translator(handler)
    assert translator.translate("Hello world", "en", "es") == "Hola mundo"
    params = seen[0].url.params
    assert seen[0].method == "GET"
    assert params["client"] == "gtx"
    assert params["sl"] == "en"
    assert params["tl"] == "es"
    assert params["dt"] == "t"
    assert params["q"] == "Hello world"


def test_cloud_endpoint_with_api_key() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {"translations": [{"translatedText": "Hola"}]}})

    translator = make_translator(handler, TranslationSettings(api_key="secret"))
    assert translator.translate("Hello", "en", "es") == "Hola"
    request = seen[0]
    assert request.method == "POST"
    assert request.url.params["key"] == "secret"
    form = parse_qs(request.content.decode())
    assert form == {"q": ["Hello"], "source": ["en"], "target": ["es"], "format": ["text"]}


def test_http_error_status() -> None:
    translator = make_translator(lambda request: httpx.Response(500, text="boom"))
    with pytest.raises(TranslationError) as excinfo:
        translator.translate("Hello", "en", "es")
    assert excinfo.value.text == "Hello"
    assert "500" in excinfo.value.reason


def test_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TranslationError, match="connection refused"):
        make_translator(handler).translate("Hello", "en", "es")


def test_invalid_json() -> None:
    translator = make_translator(lambda request: httpx.Response(200, text="<html>"))
    with pytest.raises(TranslationError, match="not valid JSON"):
        translator.translate("Hello", "en", "es")


@pytest.mark.parametrize("payload", [{"unexpected": True}, [[]], [None], []])
def test_unexpected_shape(payload) -> None:
    translator = make_translator(lambda request: httpx.Response(200, json=payload))
    with pytest.raises(TranslationError, match="no translation"):
        translator.translate("Hello", "en", "es")


def test_shared_client_is_left_open() -> None:
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))
    with GoogleTranslator(client=client):
        pass
    assert not client.is_closed
    client.close()


def test_owned_client_is_closed() -> None:
    translator = GoogleTranslator(TranslationSettings(timeout=3))
    translator.close()
    assert translator._client.is_closed
