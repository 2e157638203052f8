"""Generate match reports in various formats.

This module provides:
1. generate_cli_report() - Terminal-friendly table output
2. generate_json_report() - Machine-readable JSON
3. save_json_report() - JSON report written to disk
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from tabulate import tabulate

from itemscan.models import MatchReport
from itemscan.ocr.silver import SilverAmount


def generate_cli_report(
    report: MatchReport,
    title: str = "OCR Item Match Report",
    silver: SilverAmount | None = None,
) -> str:
    """Generate a CLI-friendly report with a results table.

    Args:
        report: Match report to render
        title: Report title
        silver: Optional silver amount read from the same text

    Returns:
        Formatted string for terminal output
    """
    lines = []
    lines.append("=" * 60)
    lines.append(title)
    lines.append("=" * 60)
    lines.append("")

    if report.results:
        headers = ["OCR Text", "Matched Entry", "Confidence", "Score", "Strategy"]
        rows = [
            [
                r.source_text,
                r.matched_entry or "-",
                r.confidence_band.value,
                f"{round(r.score * 100)}%",
                r.strategy.value,
            ]
            for r in report.results
        ]
        lines.append(tabulate(rows, headers=headers, tablefmt="simple"))
    else:
        lines.append("No OCR lines to match.")
    lines.append("")

    lines.append("-" * 40)
    lines.append(report.summary())
    if silver is not None:
        lines.append(f"Silver: {silver.value} vạn (source: {silver.source!r})")
    lines.append("")

    if report.unmatched:
        lines.append("Add to catalog:")
        lines.append(report.suggestion_block)
        lines.append("")

    return "\n".join(lines)


def generate_json_report(
    report: MatchReport,
    catalog_path: str | None = None,
    silver: SilverAmount | None = None,
) -> dict[str, Any]:
    """Generate a JSON-serializable report.

    Args:
        report: Match report
        catalog_path: Optional path of the catalog used
        silver: Optional silver amount read from the same text

    Returns:
        Dictionary suitable for JSON serialization
    """
    data: dict[str, Any] = {
        "version": "1.0.0",
        "timestamp": datetime.now().isoformat(),
        "catalog_path": catalog_path,
        "summary": report.summary(),
        **report.to_dict(),
    }
    if silver is not None:
        data["silver"] = {"value": silver.value, "source": silver.source, "method": silver.method}
    return data


def save_json_report(
    report: MatchReport,
    output_path: Path,
    catalog_path: str | None = None,
    silver: SilverAmount | None = None,
) -> None:
    """Save report as JSON file.

    Args:
        report: Match report
        output_path: Path to save JSON
        catalog_path: Optional path of the catalog used
        silver: Optional silver amount read from the same text
    """
    data = generate_json_report(report, catalog_path, silver)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
