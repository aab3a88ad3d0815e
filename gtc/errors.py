"""Shared Error Types"""


class GtcError(Exception):
    """Base for every error that aborts the translate-and-commit flow."""
    pass


class PolicyError(GtcError):
    """Raised when a value breaks a rule enforced by the pipeline itself."""
    pass


class EmptyMessageError(PolicyError):
    """Raised when the edited commit message is empty."""

    def __init__(self):
        super().__init__("Commit message is empty after editing. Aborting.")


def format_error_chain(exc: BaseException) -> str:
    """Render an exception and its explicit causes as 'outer: cause: ...'."""
    parts = []
    seen = set()
    current = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        text = str(current).strip()
        if text and text not in parts:
            parts.append(text)
        current = current.__cause__
    return ': '.join(parts) if parts else type(exc).__name__
