"""PDF render service.

:class:`PdfRenderer` is constructed once by the caller and shared between
requests; it holds configuration and registered fonts only.  Two entry
points are offered:

``stream``
    Yields the PDF as ordered byte chunks.  Errors propagate unchanged.
``render_to_buffer``
    Returns the whole PDF as ``bytes``.  Every failure is reported as
    :class:`~permitpdf.utils.errors.PdfRenderError` with the message
    ``PDF render failed``, chained to the original exception.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator, Mapping, Sequence
from datetime import datetime
from typing import Any, BinaryIO

from permitpdf.config import ConfigModel, load_config
from permitpdf.document.builder import build_document
from permitpdf.document.model import DocumentDefinition
from permitpdf.models import Application, Section
from permitpdf.utils.errors import PdfRenderError
from permitpdf.utils.logging import get_logger

from .fonts import FontRegistry
from .typesetter import Typesetter

__all__ = ["PdfRenderer"]

log = get_logger(__name__)

Sections = Sequence[Section | Mapping[str, Any]]
ApplicationLike = Application | Mapping[str, Any]


class PdfRenderer:
    """Build, redact and typeset application documents."""

    def __init__(
        self,
        config: ConfigModel | None = None,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.config = config if config is not None else load_config()
        self.fonts = FontRegistry.from_settings(self.config.fonts)
        self.typesetter = Typesetter(self.fonts, invariant=self.config.render.invariant)
        self._clock = clock

    def definition(
        self,
        sections: Sections,
        application: ApplicationLike,
        *,
        now: datetime | None = None,
    ) -> DocumentDefinition:
        """Return the document definition; ``now`` defaults to the clock."""

        return build_document(
            sections,
            application,
            now=now if now is not None else self._clock(),
            config=self.config,
        )

    def _chunks(self, definition: DocumentDefinition) -> Iterator[bytes]:
        out = io.BytesIO()
        self.typesetter.typeset(definition, out)
        data = out.getvalue()
        size = self.config.render.chunk_size
        for start in range(0, len(data), size):
            yield data[start : start + size]

    def stream(
        self,
        sections: Sections,
        application: ApplicationLike,
        *,
        now: datetime | None = None,
    ) -> Iterator[bytes]:
        """Return an iterator over the PDF bytes in emission order.

        The definition is built before returning so lookup failures raise
        here; typesetting happens on first iteration.
        """

        return self._chunks(self.definition(sections, application, now=now))

    def render_to_buffer(
        self,
        sections: Sections,
        application: ApplicationLike,
        *,
        now: datetime | None = None,
    ) -> bytes:
        """Return the complete PDF.

        Raises
        ------
        PdfRenderError
            For any failure while building or typesetting the document.
        """

        try:
            data = b"".join(self.stream(sections, application, now=now))
        except Exception as exc:
            log.error("PDF render failed: %s", type(exc).__name__)
            raise PdfRenderError() from exc
        log.info("Rendered PDF of %d bytes", len(data))
        return data

    def write(
        self,
        sections: Sections,
        application: ApplicationLike,
        destination: BinaryIO,
        *,
        now: datetime | None = None,
    ) -> int:
        """Write the PDF chunks into ``destination`` and return the byte count."""

        written = 0
        for chunk in self.stream(sections, application, now=now):
            destination.write(chunk)
            written += len(chunk)
        return written
