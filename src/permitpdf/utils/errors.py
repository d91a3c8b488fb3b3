"""Typed exceptions for document building, rendering and I/O formats."""

RENDER_FAILED_MESSAGE = "PDF render failed"


class MissingSectionError(LookupError):
    """Raised when a section required to build the document is absent."""

    def __init__(self, heading_id: str) -> None:
        super().__init__(f"no section with headingId '{heading_id}'")
        self.heading_id = heading_id


class PdfRenderError(RuntimeError):
    """Raised by the buffering render entry point for any failure.

    The message is always :data:`RENDER_FAILED_MESSAGE`; the underlying error
    is chained as ``__cause__``.
    """

    def __init__(self, message: str = RENDER_FAILED_MESSAGE) -> None:
        super().__init__(message)


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
