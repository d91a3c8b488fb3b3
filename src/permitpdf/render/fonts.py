"""Font family registration for the typesetting engine.

Families map a lower-case family name used by document styles (for example
``helvetica``) onto the engine's face names for the regular, bold, italic and
bold italic variants.  Only the PDF standard fonts are configured by default,
so no font files are loaded.
"""

from __future__ import annotations

from collections.abc import Mapping

from reportlab.pdfbase import pdfmetrics

from permitpdf.config.schema import FontFamily, FontSettings

__all__ = ["FontRegistry"]


class FontRegistry:
    """Resolve style font references to engine face names."""

    def __init__(self, families: Mapping[str, FontFamily], default_family: str) -> None:
        if default_family not in families:
            raise KeyError(f"unknown default font family '{default_family}'")
        self._families = dict(families)
        self.default_family = default_family
        for name, fam in self._families.items():
            # registration only maps names; repeating it is harmless
            pdfmetrics.registerFontFamily(
                name,
                normal=fam.normal,
                bold=fam.bold,
                italic=fam.italics,
                boldItalic=fam.bolditalics,
            )

    @classmethod
    def from_settings(cls, settings: FontSettings) -> "FontRegistry":
        return cls(settings.families, settings.default_family)

    @property
    def families(self) -> tuple[str, ...]:
        return tuple(self._families)

    def face(self, family: str | None = None, *, bold: bool = False, italic: bool = False) -> str:
        """Return the face name for ``family`` in the requested variant."""

        fam = self._families[family or self.default_family]
        if bold and italic:
            return fam.bolditalics
        if bold:
            return fam.bold
        if italic:
            return fam.italics
        return fam.normal
