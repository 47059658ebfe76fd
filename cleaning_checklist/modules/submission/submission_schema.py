from typing import List
from pydantic import BaseModel


class SubmissionItem(BaseModel):
    text: str
    done: bool


class SubmissionSection(BaseModel):
    name: str
    items: List[SubmissionItem]
    notes: str = ""


class SubmissionPayload(BaseModel):
    property: str
    sections: List[SubmissionSection]


class SubmitResponse(BaseModel):
    success: bool = True


class ErrorResponse(BaseModel):
    error: str


class SectionSummary(BaseModel):
    name: str
    done_count: int
    total_count: int
    missed_items: List[str]
    notes: str

    @property
    def all_done(self) -> bool:
        return self.done_count == self.total_count


class SubmissionSummary(BaseModel):
    property: str
    date_label: str
    time_label: str
    sections: List[SectionSummary]
    total_done: int
    total_items: int
