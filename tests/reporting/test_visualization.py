"""Tests for the HTML experience report."""

from datetime import datetime, timezone

from affectsim.affect.emotions import Emotion
from affectsim.decision.actions import Action
from affectsim.memory.experience import ExperienceLog
from affectsim.reporting.visualization import (
    REPORT_TITLE,
    format_emotion_changes,
    render_html_report,
)

FIXED_TIME = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_format_emotion_changes_sorted_by_name():
    """Deltas are listed alphabetically with two decimals."""
    log = ExperienceLog()
    experience = log.record(
        "?", {Emotion.JOY: 0.2, Emotion.CURIOSITY: 0.8, Emotion.ANGER: 0.05},
        Action.INQUIRE, "Clarification", "",
    )
    assert format_emotion_changes(experience) == "anger: 0.05, curiosity: 0.80, joy: 0.20"


def test_empty_report_has_header_only():
    """With no experiences the table has just the header row."""
    page = render_html_report([], generated_at=FIXED_TIME)

    assert page.startswith("<!DOCTYPE html>")
    assert f"<title>{REPORT_TITLE}</title>" in page
    assert "<strong>Total Experiences:</strong> 0" in page
    assert "2024-01-02T03:04:05+00:00" in page
    assert "<td>" not in page


def test_one_row_per_experience():
    """Each experience renders its cells in column order."""
    log = ExperienceLog()
    log.record("A", {Emotion.JOY: 0.4}, Action.EXPLORE, "Excitement", "")
    log.record("B", {}, Action.SEEK_COMFORT, "Relief", "")

    page = render_html_report(list(log), generated_at=FIXED_TIME)

    assert page.count("        <tr>") == 3
    assert "<td>A</td>" in page
    assert "<td>explore</td>" in page
    assert "<td>joy: 0.40</td>" in page
    assert "<td>1</td>" in page


def test_cells_are_escaped():
    """Markup in inputs is escaped."""
    log = ExperienceLog()
    log.record("<script>", {}, Action.INQUIRE, "Clarification", "")

    page = render_html_report(list(log), generated_at=FIXED_TIME)

    assert "<script>" not in page
    assert "<td>&lt;script&gt;</td>" in page
