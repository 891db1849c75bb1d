"""Tests for the translate-then-deliver pipeline with stub providers."""

import pytest

from translated_sms.errors import (
    DeliveryProviderError,
    TranslationProviderError,
    TransportError,
)
from translated_sms.message import TranslatedMessage
from translated_sms.pipeline import deliver, dispatch, translate
from translated_sms.providers.base import TranslationProvider
from translated_sms.senders.base import MessageSender


class StubProvider(TranslationProvider):
    """Returns a fixed translation, or raises a fixed error."""

    def __init__(self, result: str = "Hola", error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.error is not None:
            raise self.error
        return self.result


class StubSender(MessageSender):
    """Records sends and returns a fake confirmation."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[dict] = []

    async def send(self, from_number: str, to: str, body: str) -> dict:
        self.calls.append({"from": from_number, "to": to, "body": body})
        if self.error is not None:
            raise self.error
        return {"sid": f"SM{len(self.calls):032d}"}


@pytest.fixture
def message():
    return TranslatedMessage(recipient="+15551234567", target_language="es", content="Hello")


class TestTranslate:
    """translate() asks the provider for a fresh translation every time."""

    @pytest.mark.asyncio
    async def test_returns_provider_result(self, message):
        provider = StubProvider(result="Hola")
        assert await translate(message, provider) == "Hola"
        assert provider.calls == [("Hello", "en", "es")]

    @pytest.mark.asyncio
    async def test_no_caching(self, message):
        provider = StubProvider()
        await translate(message, provider)
        await translate(message, provider)
        assert len(provider.calls) == 2

    @pytest.mark.asyncio
    async def test_message_unchanged(self, message):
        await translate(message, StubProvider(result="Hola"))
        assert message.content == "Hello"

    @pytest.mark.asyncio
    async def test_error_propagates_unmodified(self, message):
        error = TranslationProviderError(503)
        with pytest.raises(TranslationProviderError) as exc_info:
            await translate(message, StubProvider(error=error))
        assert exc_info.value is error


class TestDispatch:
    """dispatch() sends the given text once."""

    @pytest.mark.asyncio
    async def test_sends_text_to_recipient(self, message):
        sender = StubSender()
        confirmation = await dispatch(message, "Hola", sender, "+15550000000")
        assert sender.calls == [{"from": "+15550000000", "to": "+15551234567", "body": "Hola"}]
        assert confirmation == {"sid": "SM" + "0" * 31 + "1"}

    @pytest.mark.asyncio
    async def test_each_call_sends(self, message):
        sender = StubSender()
        await dispatch(message, "Hola", sender, "+15550000000")
        await dispatch(message, "Hola", sender, "+15550000000")
        assert len(sender.calls) == 2


class TestDeliver:
    """deliver() chains translation into a single send."""

    @pytest.mark.asyncio
    async def test_sends_translation_to_recipient(self, message):
        provider = StubProvider(result="Hola")
        sender = StubSender()

        await deliver(message, provider, sender, "+15550000000")

        assert len(sender.calls) == 1
        assert sender.calls[0]["to"] == "+15551234567"
        assert sender.calls[0]["body"] == "Hola"
        assert sender.calls[0]["from"] == "+15550000000"

    @pytest.mark.asyncio
    async def test_returns_confirmation_as_is(self, message):
        confirmation = {"sid": "SMabc"}

        class FixedSender(StubSender):
            async def send(self, from_number, to, body):
                return confirmation

        result = await deliver(message, StubProvider(), FixedSender(), "+15550000000")
        assert result is confirmation

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            TranslationProviderError(503),
            TransportError("connection refused"),
            IndexError("list index out of range"),
        ],
    )
    async def test_translation_failure_skips_delivery(self, message, error):
        sender = StubSender()
        with pytest.raises(type(error)) as exc_info:
            await deliver(message, StubProvider(error=error), sender, "+15550000000")
        assert exc_info.value is error
        assert sender.calls == []

    @pytest.mark.asyncio
    async def test_delivery_failure_propagates_unmodified(self, message):
        error = DeliveryProviderError("Twilio rejected the message", status_code=400, code=21211)
        sender = StubSender(error=error)
        with pytest.raises(DeliveryProviderError) as exc_info:
            await deliver(message, StubProvider(), sender, "+15550000000")
        assert exc_info.value is error
        assert len(sender.calls) == 1

    @pytest.mark.asyncio
    async def test_one_translation_per_delivery(self, message):
        provider = StubProvider()
        sender = StubSender()
        await deliver(message, provider, sender, "+15550000000")
        await deliver(message, provider, sender, "+15550000000")
        assert len(provider.calls) == 2
        assert len(sender.calls) == 2
