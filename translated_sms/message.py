"""The translated message value object."""

from dataclasses import dataclass

# Content is always written in English
SOURCE_LANGUAGE = "en"


@dataclass(frozen=True)
class TranslatedMessage:
    """One message to translate and send to one recipient.

    Nothing is validated here: a bad phone number or language code surfaces
    as a provider error once the message is translated or delivered.

    Args:
        recipient: Destination phone number (e.g. "+15551234567").
        target_language: Two-letter target language code (e.g. "es").
        content: English text to translate.
    """

    recipient: str
    target_language: str
    content: str

    @property
    def source_language(self) -> str:
        return SOURCE_LANGUAGE

    @property
    def language_pair(self) -> str:
        """Translation direction as "en-{target_language}"."""
        return f"{SOURCE_LANGUAGE}-{self.target_language}"
