"""HTML report of the experience log."""

import html
from datetime import datetime, timezone
from typing import Optional, Sequence

from affectsim.memory.experience import Experience

REPORT_TITLE = "AI Supercomputer - Experience Visualization"

REPORT_CSS = (
    "body { font-family: sans-serif; padding: 20px; }"
    " table { border-collapse: collapse; width: 100%; margin-top: 20px; }"
    " th, td { border: 1px solid #ddd; padding: 8px; text-align: left; }"
    " th { background-color: #f2f2f2; }"
    " .meta { margin-bottom: 20px; }"
)


def format_emotion_changes(experience: Experience) -> str:
    """`anger: 0.05, curiosity: 0.80, joy: 0.20` sorted by emotion name."""
    items = sorted(experience.emotion_changes.items(), key=lambda item: item[0].value)
    return ", ".join(f"{emotion.value}: {delta:.2f}" for emotion, delta in items)


def render_html_report(
    experiences: Sequence[Experience],
    generated_at: Optional[datetime] = None,
) -> str:
    """Render the experience table as a standalone HTML page.

    Args:
        experiences: Records to list, one table row each
        generated_at: Timestamp shown in the header (defaults to now, UTC)
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    title = html.escape(REPORT_TITLE)

    parts = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '    <meta charset="utf-8">',
        f"    <title>{title}</title>",
        f"    <style>{REPORT_CSS}</style>",
        "</head>",
        "<body>",
        f"    <h1>{title}</h1>",
        '    <div class="meta">',
        f"        <p><strong>Generated:</strong> {generated_at.isoformat()}</p>",
        f"        <p><strong>Total Experiences:</strong> {len(experiences)}</p>",
        "    </div>",
        "    <h2>Recent Experiences</h2>",
        "    <table>",
        "        <tr>",
        "            <th>ID</th>",
        "            <th>Input</th>",
        "            <th>Action</th>",
        "            <th>Outcome</th>",
        "            <th>Emotion Changes</th>",
        "        </tr>",
    ]
    for experience in experiences:
        cells = (
            str(experience.index),
            experience.input,
            experience.action.value,
            experience.outcome,
            format_emotion_changes(experience),
        )
        parts.append("        <tr>")
        parts.extend(f"            <td>{html.escape(cell)}</td>" for cell in cells)
        parts.append("        </tr>")
    parts.extend([
        "    </table>",
        "</body>",
        "</html>",
    ])
    return "\n".join(parts) + "\n"
