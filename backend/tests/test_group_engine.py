import sys
from pathlib import Path
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from services.group_engine import group_by, group_key


def test_group_by_normalizes_blank_and_none():
    rows = [{"State": "CA"}, {"State": ""}, {"State": None}]
    assert group_by(rows, "State") == [
        {"key": "CA", "count": 1},
        {"key": "Unknown", "count": 2},
    ]


def test_missing_field_and_whitespace_are_unknown():
    rows = [{"Other": "x"}, {"State": "   "}, {"State": "\t"}]
    assert group_by(rows, "State") == [{"key": "Unknown", "count": 3}]


def test_keys_keep_first_seen_order_and_are_not_trimmed():
    rows = [{"s": "NY"}, {"s": " CA"}, {"s": "NY"}, {"s": "AZ"}, {"s": " CA"}]
    assert group_by(rows, "s") == [
        {"key": "NY", "count": 2},
        {"key": " CA", "count": 2},
        {"key": "AZ", "count": 1},
    ]


def test_non_string_values_use_string_form():
    assert group_key(3) == "3"
    assert group_key(0) == "0"
    assert group_key("Unknown") == "Unknown"


def test_counts_sum_to_row_count():
    rows = [{"g": v} for v in ["a", "", "b", None, "a", "c", " "]] + [{}]
    result = group_by(rows, "g")
    assert sum(r["count"] for r in result) == len(rows)


def test_empty_table():
    assert group_by([], "State") == []


def test_group_by_is_idempotent():
    rows = ({"g": "x"}, {"g": "y"}, {"g": "x"})
    assert group_by(rows, "g") == group_by(rows, "g")


def test_blank_matches_javascript_trim():
    # BOM and no-break space are blank, ASCII separators are real values
    assert group_key(chr(0xFEFF)) == "Unknown"
    assert group_key(chr(0xA0) + " ") == "Unknown"
    assert group_key(chr(0x1C)) == chr(0x1C)
    assert group_key(chr(0x85)) == chr(0x85)
