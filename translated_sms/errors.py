"""Exception hierarchy for translation and delivery failures."""


class TranslatedSmsError(Exception):
    """Base exception for all translated-sms errors."""


class TransportError(TranslatedSmsError):
    """A network call to a provider could not complete."""


class TranslationProviderError(TranslatedSmsError):
    """The translation provider answered with a non-success status."""

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        message = f"Unexpected translation provider response code: {status_code}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class ResponseFormatError(TranslatedSmsError):
    """The translation response did not hold any usable translated text."""


class DeliveryProviderError(TranslatedSmsError):
    """The delivery provider rejected or failed to send the message."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: int | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        super().__init__(message)
