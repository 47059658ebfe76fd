"""Client-side controller for a property checklist page.

Holds the form state a cleaner edits on their phone and drives
``POST /api/submit`` through any ``httpx.Client``; a FastAPI ``TestClient``
works as well as a client pointed at a deployed server.
"""
import logging
import threading
from enum import Enum
from typing import Dict, Optional, Set

import httpx

from cleaning_checklist.modules.checklist.checklist_catalog import get_checklist
from cleaning_checklist.modules.checklist.checklist_schema import Checklist
from cleaning_checklist.modules.checklist.checklist_serializer import build_submission
from cleaning_checklist.modules.submission.submission_schema import SubmissionPayload

logger = logging.getLogger(__name__)

SUBMIT_PATH = "/api/submit"
GENERIC_FAILURE = "Failed to submit."
NETWORK_FAILURE = "Network error. Please try again."


class SubmitStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class SectionProgress:
    def __init__(self, done: int, total: int):
        self.done = done
        self.total = total

    @property
    def all_done(self) -> bool:
        return self.done == self.total

    def __repr__(self) -> str:
        return f"SectionProgress({self.done}/{self.total})"


class ChecklistForm:
    """Session state of one property's checklist page.

    Sections are addressed by their position in the checklist. Every section
    starts collapsed.
    """

    def __init__(self, checklist: Optional[Checklist]):
        self.checklist = checklist
        self.checked: Dict[int, Set[int]] = {}
        self.notes: Dict[int, str] = {}
        self.collapsed: Dict[int, bool] = {}
        if checklist:
            self.collapsed = {position: True for position in range(len(checklist.sections))}
        self.status = SubmitStatus.IDLE
        self.error_message = ""
        self._in_flight = threading.Lock()

    @classmethod
    def for_property(cls, slug: str) -> "ChecklistForm":
        return cls(get_checklist(slug))

    # -------------------------
    # View state
    # -------------------------
    @property
    def view(self) -> str:
        if not self.checklist:
            return "not_found"
        if self.status == SubmitStatus.SUCCESS:
            return "success"
        return "form"

    @property
    def can_submit(self) -> bool:
        return self.view == "form" and self.status != SubmitStatus.SUBMITTING

    @property
    def visible_error(self) -> str:
        return self.error_message if self.status == SubmitStatus.ERROR else ""

    def is_collapsed(self, section: int) -> bool:
        self._ensure_section(section)
        return self.collapsed[section]

    def section_progress(self, section: int) -> SectionProgress:
        items = self._ensure_section(section)
        return SectionProgress(len(self.checked.get(section, ())), len(items))

    # -------------------------
    # Mutations
    # -------------------------
    def toggle_item(self, section: int, index: int) -> None:
        items = self._ensure_section(section)
        if not 0 <= index < len(items):
            raise IndexError(f"Item {index} out of range for section {section}")
        section_checked = self.checked.setdefault(section, set())
        if index in section_checked:
            section_checked.remove(index)
        else:
            section_checked.add(index)

    def toggle_section(self, section: int) -> None:
        self._ensure_section(section)
        self.collapsed[section] = not self.collapsed[section]

    def update_notes(self, section: int, text: str) -> None:
        self._ensure_section(section)
        self.notes[section] = text

    def payload(self) -> Optional[SubmissionPayload]:
        if not self.checklist:
            return None
        return build_submission(self.checklist, self.checked, self.notes)

    def submit(self, client: httpx.Client, url: str = SUBMIT_PATH) -> SubmitStatus:
        if not self.checklist or self.status == SubmitStatus.SUCCESS:
            return self.status
        if not self._in_flight.acquire(blocking=False):
            return self.status

        try:
            # a concurrent submit may have succeeded between the check above and the acquire
            if self.status == SubmitStatus.SUCCESS:
                return self.status
            self.status = SubmitStatus.SUBMITTING
            self.error_message = ""
            payload = self.payload()
            try:
                response = client.post(url, json=payload.model_dump())
                data = response.json()
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning("Submit for %s failed before a response: %s", self.checklist.name, exc)
                self.error_message = NETWORK_FAILURE
                self.status = SubmitStatus.ERROR
                return self.status

            if isinstance(data, dict) and data.get("success"):
                self.status = SubmitStatus.SUCCESS
            else:
                error = data.get("error") if isinstance(data, dict) else None
                self.error_message = error or GENERIC_FAILURE
                self.status = SubmitStatus.ERROR
            return self.status
        finally:
            self._in_flight.release()

    # -------------------------
    # Helpers
    # -------------------------
    def _ensure_section(self, section: int):
        if not self.checklist:
            raise LookupError("No checklist loaded")
        if not 0 <= section < len(self.checklist.sections):
            raise IndexError(f"Section {section} out of range")
        return self.checklist.sections[section].items
