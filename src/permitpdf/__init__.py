"""PDF rendering service for permit applications.

Answer sections supplied by the forms framework are redacted (the day is
stripped from dates of birth), assembled into an engine independent document
definition and typeset into a PDF.  The command line preview tool lives in
:mod:`permitpdf.cli`.
"""

from .document import DocumentDefinition, build_document
from .models import Answer, Application, PermitHolderType, Section
from .redact import redact_sections
from .render import PdfRenderer
from .utils.constants import PDF_CONTENT_TYPE
from .utils.errors import MissingSectionError, PdfRenderError

__all__ = [
    "Answer",
    "Application",
    "DocumentDefinition",
    "MissingSectionError",
    "PDF_CONTENT_TYPE",
    "PdfRenderError",
    "PdfRenderer",
    "PermitHolderType",
    "Section",
    "build_document",
    "redact_sections",
]
