from translated_sms.providers.base import TranslationProvider
from translated_sms.providers.yandex import YandexProvider

__all__ = ["TranslationProvider", "YandexProvider"]
