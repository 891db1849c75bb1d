"""Twilio sender: delivers SMS through the Twilio REST API."""

import asyncio
import logging
from typing import Any

import requests
from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client

from translated_sms.errors import DeliveryProviderError
from translated_sms.senders.base import MessageSender

logger = logging.getLogger(__name__)


class TwilioSender(MessageSender):
    """Sends SMS with the Twilio SDK.

    The SDK is blocking, so each call runs in a worker thread.
    """

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        client: Client | None = None,
    ) -> None:
        if client is None:
            if account_sid is None or auth_token is None:
                from translated_sms.config import TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN

                account_sid = TWILIO_ACCOUNT_SID if account_sid is None else account_sid
                auth_token = TWILIO_AUTH_TOKEN if auth_token is None else auth_token

            try:
                client = Client(account_sid, auth_token)
            except TwilioException as exc:
                raise DeliveryProviderError(f"Could not create Twilio client: {exc}") from exc

        self._client: Client = client

    async def send(self, from_number: str, to: str, body: str) -> Any:
        try:
            message = await asyncio.to_thread(
                self._client.messages.create, from_=from_number, to=to, body=body
            )
        except TwilioRestException as exc:
            logger.error("Twilio API error: %s (code %s)", exc.status, exc.code)
            raise DeliveryProviderError(
                f"Twilio rejected the message: {exc.msg}", status_code=exc.status, code=exc.code
            ) from exc
        except (TwilioException, requests.RequestException) as exc:
            logger.error("Twilio request failed: %s", exc)
            raise DeliveryProviderError(f"Twilio request failed: {exc}") from exc

        logger.info("Twilio accepted message %s", message.sid)
        return message
