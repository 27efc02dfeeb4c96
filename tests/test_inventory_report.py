import json

from sablan_text.inventory.report import (
    INVENTORY_CSV,
    INVENTORY_JSON,
    count_by_class,
    render_csv,
    write_inventory,
)
from sablan_text.inventory.scan import CorruptionRecord


RECORDS = [
    CorruptionRecord("frontend/src/a.ts", 3, 'title: "Ø³"', "mojibake", 0.95),
    CorruptionRecord("backend/src/b.ts", 7, "x ?? y", "question-marks", 0.65),
    CorruptionRecord("backend/src/c.ts", 1, "Ù", "mojibake", 0.95),
]


def test_csv_quotes_token_and_ends_with_newline() -> None:
    assert render_csv(RECORDS[:2]) == (
        "file,line,class,confidence,token\n"
        'frontend/src/a.ts,3,mojibake,0.95,"title: ""Ø³"""\n'
        'backend/src/b.ts,7,question-marks,0.65,"x ?? y"\n'
    )


def test_csv_for_empty_inventory() -> None:
    assert render_csv([]) == "file,line,class,confidence,token\n\n"


def test_write_inventory(tmp_path) -> None:
    out = tmp_path / "reports"
    json_path, csv_path = write_inventory(RECORDS, out)

    assert json_path == out / INVENTORY_JSON
    assert csv_path == out / INVENTORY_CSV

    text = json_path.read_text(encoding="utf-8")
    assert "Ø³" in text
    data = json.loads(text)
    assert data[1] == {
        "file": "backend/src/b.ts",
        "line": 7,
        "token": "x ?? y",
        "class": "question-marks",
        "confidence": 0.65,
    }
    assert list(data[0]) == ["file", "line", "token", "class", "confidence"]
    assert csv_path.read_text(encoding="utf-8").count("\n") == 4


def test_write_inventory_replaces_previous_report(tmp_path) -> None:
    write_inventory(RECORDS, tmp_path)
    json_path, _ = write_inventory([], tmp_path)
    assert json.loads(json_path.read_text(encoding="utf-8")) == []
    assert sorted(p.name for p in tmp_path.iterdir()) == [INVENTORY_CSV, INVENTORY_JSON]


def test_count_by_class_keeps_first_seen_order() -> None:
    assert count_by_class(RECORDS) == {"mojibake": 2, "question-marks": 1}
    assert list(count_by_class(RECORDS)) == ["mojibake", "question-marks"]
