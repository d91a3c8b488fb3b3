"""Tests for the extension-based I/O registry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from permitpdf.io import get_extension, read_file, write_file
from permitpdf.utils.errors import UnsupportedFormatError


def test_unknown_extension_raises(tmp_path: Path) -> None:
    path = tmp_path / "file.unknown"
    with pytest.raises(UnsupportedFormatError):
        read_file(path)
    with pytest.raises(UnsupportedFormatError):
        write_file(path, b"data")


def test_json_and_yaml_payloads(tmp_path: Path) -> None:
    payload = [{"headingId": "section-permit-heading", "answers": [{"answer": "x"}]}]
    json_path = tmp_path / "sections.json"
    json_path.write_text(json.dumps(payload), encoding="utf-8")
    assert read_file(json_path) == payload

    yaml_path = tmp_path / "application.YAML"
    yaml_path.write_text("applicationNumber: '123'\n", encoding="utf-8")
    assert read_file(yaml_path) == {"applicationNumber": "123"}


def test_pdf_writer_requires_bytes(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "out.pdf"
    write_file(out, b"%PDF-1.4\n")
    assert out.read_bytes() == b"%PDF-1.4\n"
    with pytest.raises(TypeError):
        write_file(tmp_path / "bad.pdf", "not bytes")


def test_json_writer(tmp_path: Path) -> None:
    out = tmp_path / "definition.json"
    write_file(out, {"info": {"title": "Application for x"}})
    assert json.loads(out.read_text(encoding="utf-8")) == {"info": {"title": "Application for x"}}


def test_extension_case_insensitive() -> None:
    assert get_extension("SAMPLE.JSON") == ".json"
    assert get_extension("noext") == ""


def test_payload_and_output_formats_are_separate(tmp_path: Path) -> None:
    pdf = tmp_path / "out.pdf"
    pdf.write_bytes(b"%PDF-1.4\n")
    with pytest.raises(UnsupportedFormatError, match="Cannot read payloads from '.pdf'"):
        read_file(pdf)
    with pytest.raises(UnsupportedFormatError, match="Cannot write output to '.yml'"):
        write_file(tmp_path / "definition.yml", {"content": []})
