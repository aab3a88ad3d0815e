"""Translator Base Classes and Errors"""

from abc import ABC, abstractmethod

from gtc.errors import GtcError


class TranslationError(GtcError):
    """Raised when a message cannot be translated."""
    pass


class TranslatorLaunchError(TranslationError):
    """The translation tool could not be started at all."""

    def __init__(self, binary: str, install_hint: str):
        self.binary = binary
        super().__init__(f"Translation failed: could not run '{binary}'. {install_hint}")


class TranslatorFailedError(TranslationError):
    """The translation tool ran and reported failure."""

    def __init__(self, stderr: str):
        self.stderr = stderr
        detail = f": {stderr}" if stderr else ""
        super().__init__(f"Translation failed{detail}")


class InvalidEncodingError(TranslationError):
    def __init__(self):
        super().__init__("Translation result is not valid UTF-8")


class EmptyTranslationError(TranslationError):
    def __init__(self):
        super().__init__("Translation result is empty")


class Translator(ABC):
    """Abstract base for translators into English."""

    @abstractmethod
    def translate(self, message: str) -> str:
        """Return the trimmed, non-empty English translation of message."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        pass
