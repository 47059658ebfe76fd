from typing import AbstractSet, Mapping

from cleaning_checklist.modules.checklist.checklist_schema import Checklist
from cleaning_checklist.modules.submission.submission_schema import (
    SubmissionItem,
    SubmissionPayload,
    SubmissionSection,
)


def build_submission(
    checklist: Checklist,
    checked: Mapping[int, AbstractSet[int]],
    notes: Mapping[int, str],
) -> SubmissionPayload:
    """Merge form state into the checklist shape, in checklist order.

    ``checked`` and ``notes`` are keyed by section position. A section with no
    entry in ``checked`` has every item undone; notes are stripped and a
    missing or blank note becomes "".
    """
    sections = []
    for position, section in enumerate(checklist.sections):
        section_checked = checked.get(position, frozenset())
        sections.append(
            SubmissionSection(
                name=section.name,
                items=[
                    SubmissionItem(text=item, done=index in section_checked)
                    for index, item in enumerate(section.items)
                ],
                notes=(notes.get(position) or "").strip(),
            )
        )
    return SubmissionPayload(property=checklist.name, sections=sections)
