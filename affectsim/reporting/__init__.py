"""Human-readable renderings of the agent's state and history."""

from affectsim.reporting.summary import build_summary, format_emotion_headline
from affectsim.reporting.visualization import REPORT_TITLE, render_html_report

__all__ = [
    "build_summary",
    "format_emotion_headline",
    "REPORT_TITLE",
    "render_html_report",
]
