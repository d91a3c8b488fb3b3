from __future__ import annotations

import json
from datetime import datetime

from permitpdf.document import BulletList, Text, TextStyle, build_document

SECTIONS = [
    {
        "headingId": "section-permit-heading",
        "heading": "Permit",
        "answers": [{"answer": "SR2015 No 39"}],
    },
    {"headingId": "section-contact-name-heading", "answers": [{"answer": "Jo Bloggs"}]},
    {"headingId": "section-permit-holder-type-heading", "answers": [{"answer": "Individual"}]},
]


def test_style_merging() -> None:
    base = TextStyle(
        font="helvetica", font_size=12, bold=False, line_height=1.35, margin=(0, 0, 0, 6)
    )
    merged = TextStyle(bold=True, margin=(0, 3, 0, 3)).merged_onto(base)
    assert merged == TextStyle(
        font="helvetica", font_size=12, bold=True, line_height=1.35, margin=(0, 3, 0, 3)
    )


def test_block_dicts() -> None:
    assert Text("plain").to_dict() == "plain"
    assert Text("bold", style="th").to_dict() == {"text": "bold", "style": "th"}
    assert BulletList(("a", "b")).to_dict() == {"ul": ["a", "b"]}


def test_definition_to_dict_is_json_ready() -> None:
    doc = build_document(SECTIONS, {"applicationNumber": "EPR/1"}, now=datetime(2020, 1, 9, 0, 30))
    data = doc.to_dict()
    json.dumps(data)
    assert data["pageSize"] == "A4"
    assert data["pageMargins"] == [25, 25, 25, 25]
    assert data["defaultStyle"]["font"] == "helvetica"
    assert data["styles"]["th"] == {"bold": True, "margin": [0, 3, 0, 3]}
    assert data["info"]["creationDate"] == "09/01/2020"
    assert data["content"][0] == {"text": "Application for SR2015 No 39", "style": "h1"}
    assert data["content"][2] == "Submitted on 09 Jan 2020 at 12:30am"
    table = data["content"][4]
    assert table["layout"] == "lightHorizontalLines"
    assert table["style"] == "tableApplication"
    assert table["table"]["headerRows"] == 0
    body = table["table"]["body"]
    assert body[0] == [{"text": "Permit", "style": "th"}, {"text": "SR2015 No 39", "style": "td"}]
    assert body[-1][0] == {"text": "Declaration", "style": "th"}
    assert body[-1][1][1]["ul"][-1] == "the information they gave was true"
