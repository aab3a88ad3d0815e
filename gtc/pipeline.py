"""Translate-and-Commit Pipeline

Runs the four stages in order: repository check, translation, interactive
edit, commit. The first failing stage aborts the run with its own exception.
"""

import time
from dataclasses import dataclass, field
from enum import Enum

from gtc.errors import EmptyMessageError
from gtc.output import bold, info, success
from gtc.translate import TranslationError


class Stage(Enum):
    INIT = "init"
    GUARD_CHECKED = "guard_checked"
    TRANSLATED = "translated"
    EDITED = "edited"
    COMMITTED = "committed"


@dataclass
class PipelineResult:
    """What a successful run produced."""
    stage: Stage
    translated: str = ""
    message: str = ""
    timings: dict[str, float] = field(default_factory=dict)


class Pipeline:
    """Binds a git client, a translator and an editor into one run.

    Args:
        git: Object with ensure_repository() and commit(message).
        translator: A Translator.
        editor: Object with edit(initial) -> str.
        show_progress: Print a status line while translating.
    """

    def __init__(self, git, translator, editor, show_progress: bool = False):
        self.git = git
        self.translator = translator
        self.editor = editor
        self.show_progress = show_progress
        self.stage = Stage.INIT

    def run(self, raw_message: str) -> PipelineResult:
        self.stage = Stage.INIT
        result = PipelineResult(stage=self.stage)

        t0 = time.time()
        self.git.ensure_repository()
        result.timings['git'] = time.time() - t0
        self._advance(result, Stage.GUARD_CHECKED)

        result.translated = self._translate(raw_message, result.timings)
        self._advance(result, Stage.TRANSLATED)

        t0 = time.time()
        edited = self.editor.edit(result.translated)
        result.timings['edit'] = time.time() - t0
        self._advance(result, Stage.EDITED)

        # An empty edit is treated as "do not commit"
        if not edited.strip():
            raise EmptyMessageError()
        result.message = edited.strip()

        t0 = time.time()
        self.git.commit(result.message)
        result.timings['commit'] = time.time() - t0
        self._advance(result, Stage.COMMITTED)
        return result

    def _advance(self, result: PipelineResult, stage: Stage) -> None:
        self.stage = stage
        result.stage = stage

    def _translate(self, raw_message: str, timings: dict[str, float]) -> str:
        if self.show_progress:
            print(f"Translating with {info(self.translator.name)}... ", end='', flush=True)
        t0 = time.time()
        try:
            translated = self.translator.translate(raw_message)
        except TranslationError:
            if self.show_progress:
                print()
            raise
        timings['translate'] = time.time() - t0
        if self.show_progress:
            print(success("done!"))
            print(bold("Edit the message and press Enter to commit (Ctrl-C to cancel):"))
        return translated
