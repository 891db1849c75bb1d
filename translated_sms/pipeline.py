"""Translate-then-deliver pipeline.

A message goes through two steps, strictly in order:

    translate -> dispatch

Each step makes exactly one provider call. Nothing is retried and nothing is
caught here: the first failure propagates to the caller, so a failed
translation never reaches the sender.
"""

import logging
from typing import Any

from translated_sms.message import TranslatedMessage
from translated_sms.providers.base import TranslationProvider
from translated_sms.senders.base import MessageSender

logger = logging.getLogger(__name__)


async def translate(message: TranslatedMessage, provider: TranslationProvider) -> str:
    """Return a fresh translation of the message content.

    Every call issues a new provider request; results are not cached.
    """
    logger.debug("Requesting %s translation for %s", message.language_pair, message.recipient)
    return await provider.translate(
        message.content, message.source_language, message.target_language
    )


async def dispatch(
    message: TranslatedMessage,
    text: str,
    sender: MessageSender,
    from_number: str,
) -> Any:
    """Send already translated text to the message recipient.

    Not idempotent: every call sends one SMS.
    """
    logger.info("Sending %s message to %s", message.target_language, message.recipient)
    return await sender.send(from_number, message.recipient, text)


async def deliver(
    message: TranslatedMessage,
    provider: TranslationProvider,
    sender: MessageSender,
    from_number: str,
) -> Any:
    """Translate the message, then send the translation to its recipient.

    Args:
        message: Message to translate and send.
        provider: Translation provider.
        sender: SMS delivery provider.
        from_number: Sender phone number.

    Returns:
        The sender's confirmation, unchanged.
    """
    translated = await translate(message, provider)
    return await dispatch(message, translated, sender, from_number)
