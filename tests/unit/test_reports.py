"""
Unit tests for report generation (itemscan/reports.py).
"""

import json

import pytest

from itemscan import ItemMatcher, MatchReport
from itemscan.ocr.silver import SilverAmount
from itemscan.reports import generate_cli_report, generate_json_report, save_json_report


@pytest.fixture
def report(sample_catalog):
    """One exact match and one unmatched line."""
    matcher = ItemMatcher(sample_catalog)
    return matcher.match_text(
        "Thúy Lựu Thạch Giới Chỉ (cấp 5)\nRandom Unrelated Junk Line",
        ocr_confidence=91.2,
    )


class TestCliReport:
    """Tests for generate_cli_report."""

    def test_table(self, report):
        """Each line gets a row with entry, band, percent score and strategy."""
        output = generate_cli_report(report)

        assert "OCR Item Match Report" in output
        assert "Matched Entry" in output
        assert "exact" in output
        assert "100%" in output
        assert "Matched 1/2 items (OCR: 91%)" in output

    def test_suggestions_for_unmatched(self, report):
        """Unmatched lines are offered as catalog entries."""
        output = generate_cli_report(report)
        assert "Add to catalog:" in output
        assert "Random Unrelated Junk Line - Thổ (cấp 5)" in output

    def test_no_suggestions_when_all_matched(self, sample_catalog):
        """The suggestion block is omitted when everything matched."""
        report = ItemMatcher(sample_catalog).match_text("Thúy Lựu Thạch Giới Chỉ (cấp 5)")
        assert "Add to catalog:" not in generate_cli_report(report)

    def test_empty_report(self):
        """An empty report says so instead of printing an empty table."""
        output = generate_cli_report(MatchReport(), title="Inventory")
        assert "Inventory" in output
        assert "No OCR lines to match." in output
        assert "Matched 0/0 items" in output

    def test_silver_line(self, report):
        """The silver amount is shown with its source fragment."""
        output = generate_cli_report(report, silver=SilverAmount(350, "350 vạn", "unit"))
        assert "Silver: 350 vạn (source: '350 vạn')" in output


class TestJsonReport:
    """Tests for JSON report generation."""

    def test_fields(self, report):
        """The JSON report carries metadata, counts and per-line results."""
        data = generate_json_report(report, catalog_path="vatpham.txt")

        assert data["version"] == "1.0.0"
        assert data["catalog_path"] == "vatpham.txt"
        assert data["summary"] == "Matched 1/2 items (OCR: 91%)"
        assert data["matched_count"] == 1
        assert data["results"][0]["strategy"] == "exact"
        assert data["results"][1]["matched_entry"] is None
        assert "silver" not in data

    def test_silver(self, report):
        """Silver is included when provided."""
        data = generate_json_report(report, silver=SilverAmount(350, "350 vạn", "unit"))
        assert data["silver"] == {"value": 350, "source": "350 vạn", "method": "unit"}

    def test_serializable(self, report):
        """The report survives json.dumps."""
        json.dumps(generate_json_report(report))

    def test_save(self, report, tmp_path):
        """Saved reports create parent directories and keep Vietnamese text."""
        path = tmp_path / "out" / "report.json"
        save_json_report(report, path)

        content = path.read_text(encoding="utf-8")
        assert "Thúy Lựu Thạch Giới Chỉ (cấp 5)" in content
        assert json.loads(content)["total_count"] == 2
