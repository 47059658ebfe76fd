import logging
from datetime import datetime
from html import escape
from typing import Any, Callable, List, Optional
from zoneinfo import ZoneInfo

from fastapi import HTTPException, status

from cleaning_checklist.config.settings import settings
from cleaning_checklist.modules.submission.submission_schema import (
    SectionSummary,
    SubmissionPayload,
    SubmissionSection,
    SubmissionSummary,
)
from cleaning_checklist.shared.email import EmailDispatchError, Mailer

logger = logging.getLogger(__name__)

DONE_COLOR = "#5FB8AD"
MISSED_COLOR = "#D4874D"

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def default_clock() -> datetime:
    if settings.TIMEZONE:
        return datetime.now(ZoneInfo(settings.TIMEZONE))
    return datetime.now()


def format_date(moment: datetime) -> str:
    """e.g. Monday, October 19, 2026, in English whatever the server locale"""
    return f"{DAY_NAMES[moment.weekday()]}, {MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"


def format_time(moment: datetime) -> str:
    """e.g. 3:04 PM"""
    hour = moment.hour % 12 or 12
    return f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"


def summarize_section(section: SubmissionSection) -> SectionSummary:
    missed = [item.text for item in section.items if not item.done]
    return SectionSummary(
        name=section.name,
        done_count=len(section.items) - len(missed),
        total_count=len(section.items),
        missed_items=missed,
        notes=section.notes,
    )


def summarize(property_name: str, sections: List[SubmissionSection], moment: datetime) -> SubmissionSummary:
    section_summaries = [summarize_section(section) for section in sections]
    return SubmissionSummary(
        property=property_name,
        date_label=format_date(moment),
        time_label=format_time(moment),
        sections=section_summaries,
        total_done=sum(s.done_count for s in section_summaries),
        total_items=sum(s.total_count for s in section_summaries),
    )


def render_html(summary: SubmissionSummary) -> str:
    html = [
        '<div style="font-family: sans-serif; max-width: 600px; margin: 0 auto;">',
        f'<h1 style="color: {DONE_COLOR};">Cleaning Complete — {escape(summary.property)}</h1>',
        f'<p style="color: #888;">{summary.date_label} at {summary.time_label}</p>',
        "<hr />",
    ]

    for section in summary.sections:
        color = DONE_COLOR if section.all_done else MISSED_COLOR
        html.append(
            f'<h2 style="color: {color};">{escape(section.name)} '
            f'<span style="font-weight: normal;">({section.done_count}/{section.total_count})</span></h2>'
        )
        if section.all_done and not section.notes:
            html.append(f'<p style="color: {DONE_COLOR};">All items completed</p>')
            continue
        if section.missed_items:
            html.append(f'<p style="color: {MISSED_COLOR}; font-weight: 600;">Incomplete:</p><ul>')
            html.extend(f"<li>{escape(text)}</li>" for text in section.missed_items)
            html.append("</ul>")
        if section.notes:
            notes = escape(section.notes).replace("\n", "<br>")
            html.append(f'<p style="background: #F5F1EB; padding: 8px 12px;"><strong>Notes:</strong> {notes}</p>')

    html.append("<hr />")
    html.append(
        f"<p><strong>Total:</strong> {summary.total_done}/{summary.total_items} items completed</p>"
    )
    html.append("</div>")
    return "\n".join(html)


def render_text(summary: SubmissionSummary) -> str:
    lines = [
        f"Cleaning Complete — {summary.property}",
        f"{summary.date_label} at {summary.time_label}",
        "",
    ]
    for section in summary.sections:
        lines.append(f"{section.name} ({section.done_count}/{section.total_count})")
        if section.all_done and not section.notes:
            lines.append("  All items completed")
        else:
            if section.missed_items:
                lines.append("  Incomplete:")
                lines.extend(f"  - {text}" for text in section.missed_items)
            if section.notes:
                lines.append(f"  Notes: {section.notes}")
        lines.append("")
    lines.append(f"Total: {summary.total_done}/{summary.total_items} items completed")
    return "\n".join(lines)


class SubmissionService:
    def __init__(self, mailer: Mailer, clock: Optional[Callable[[], datetime]] = None):
        self.mailer = mailer
        self.clock = clock or default_clock

    def submit(self, body: Any) -> SubmissionSummary:
        """Validate a decoded request body, render the summary and mail it.

        Only a missing ``property`` or ``sections`` is a client error. A body
        whose sections have the wrong shape raises ``pydantic.ValidationError``
        for the caller to report as a server error.
        """
        if not isinstance(body, dict) or not body.get("property") or body.get("sections") is None:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing required fields")

        payload = SubmissionPayload.model_validate(body)
        summary = summarize(payload.property, payload.sections, self.clock())
        subject = f"Cleaning Complete — {summary.property} ({summary.date_label})"

        try:
            self.mailer(str(settings.ADMIN_EMAIL), subject, render_html(summary), render_text(summary))
        except EmailDispatchError as exc:
            logger.error("Email dispatch failed for %s: %s", summary.property, exc.message)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exc.message)

        logger.info(
            "Submitted checklist for %s: %s/%s items completed",
            summary.property,
            summary.total_done,
            summary.total_items,
        )
        return summary
