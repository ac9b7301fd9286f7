# Service Errors
"""Exceptions raised by the content source clients."""


class ContentSourceError(RuntimeError):
    """
    A content source could not be queried.

    Raised instead of returning an empty record set, so that callers can tell
    "nothing matched" apart from "the source was unavailable".
    """

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")
