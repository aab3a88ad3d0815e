"""Translation Package"""

from gtc.translate.base import (
    Translator,
    TranslationError,
    TranslatorLaunchError,
    TranslatorFailedError,
    InvalidEncodingError,
    EmptyTranslationError,
)
from gtc.translate.trans import TransTranslator

__all__ = [
    "Translator",
    "TranslationError",
    "TranslatorLaunchError",
    "TranslatorFailedError",
    "InvalidEncodingError",
    "EmptyTranslationError",
    "TransTranslator",
]
