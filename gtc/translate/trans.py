"""translate-shell Translator

Wraps the `trans` command line tool (https://github.com/soimort/translate-shell).
"""

import subprocess
from typing import Callable

from gtc.translate.base import (
    Translator,
    TranslatorLaunchError,
    TranslatorFailedError,
    InvalidEncodingError,
    EmptyTranslationError,
)


class TransTranslator(Translator):
    """Translates with `trans -b :en MESSAGE`. Requires translate-shell."""

    BINARY = "trans"
    TARGET_LANGUAGE = "en"
    INSTALL_HINT = "Check that translate-shell is installed (e.g. apt install translate-shell)."

    def __init__(self, runner: Callable[..., subprocess.CompletedProcess] = subprocess.run, binary: str | None = None):
        self._run = runner
        self.binary = binary or self.BINARY

    @property
    def name(self) -> str:
        return f"translate-shell ({self.binary})"

    def _build_command(self, message: str) -> list[str]:
        # -b: brief mode, print only the translation
        return [self.binary, '-b', f':{self.TARGET_LANGUAGE}', message]

    def translate(self, message: str) -> str:
        try:
            result = self._run(self._build_command(message), capture_output=True)
        except OSError as e:
            raise TranslatorLaunchError(self.binary, self.INSTALL_HINT) from e

        if result.returncode != 0:
            # stderr is decoded lossily, stdout strictly
            stderr = (result.stderr or b'').decode('utf-8', errors='replace').strip()
            raise TranslatorFailedError(stderr)

        try:
            translated = (result.stdout or b'').decode('utf-8')
        except UnicodeDecodeError as e:
            raise InvalidEncodingError() from e

        translated = translated.strip()
        if not translated:
            raise EmptyTranslationError()
        return translated
