"""Exceptions raised by kiloview components."""


class KiloviewError(Exception):
    """Base class for viewer errors."""


class NotATerminal(KiloviewError):
    """Standard input is not a terminal device."""


class OpenError(KiloviewError):
    """The file given on the command line could not be opened."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot open {path}: {reason}")
        self.path = path
        self.reason = reason


class CursorReportError(KiloviewError):
    """The terminal answered a cursor position request with garbage."""

    def __init__(self, field: str, text: bytes):
        super().__init__(f"Failed to parse window {field} size {text!r}")
        self.field = field
        self.text = text
