"""Entry point: translate one message and send it by SMS."""

import logging

import rich_click as click

from translated_sms import config
from translated_sms.async_tools import run_sync
from translated_sms.errors import TranslatedSmsError
from translated_sms.message import TranslatedMessage
from translated_sms.pipeline import dispatch, translate
from translated_sms.providers.yandex import YandexProvider
from translated_sms.senders.twilio_sms import TwilioSender

logger = logging.getLogger(__name__)


@click.command()
@click.argument("recipient", type=str)
@click.argument("target_language", type=str)
@click.argument("content", type=str)
@click.option(
    "--from",
    "from_number",
    default=config.TWILIO_PHONE_NUMBER,
    show_default="TWILIO_PHONE_NUMBER",
    help="Sender phone number",
)
@click.option(
    "--translate-only",
    is_flag=True,
    help="Print the translation without sending any SMS",
)
@run_sync
async def main(
    recipient: str,
    target_language: str,
    content: str,
    from_number: str,
    translate_only: bool,
) -> None:
    """Translate CONTENT from English into TARGET_LANGUAGE and text it to RECIPIENT."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    message = TranslatedMessage(
        recipient=recipient,
        target_language=target_language,
        content=content,
    )
    provider = YandexProvider()

    try:
        translated = await translate(message, provider)
        if translate_only:
            click.echo(translated)
            return

        # The Twilio client is only built once a translation exists
        sender = TwilioSender()
        confirmation = await dispatch(message, translated, sender, from_number)
        click.echo(confirmation.sid)
    except TranslatedSmsError as e:
        raise click.ClickException(str(e)) from e
    finally:
        await provider.close()


if __name__ == "__main__":
    main()
