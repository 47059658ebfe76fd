from typing import List, Tuple
from pydantic import BaseModel, ConfigDict


class ChecklistSection(BaseModel):
    name: str
    items: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)


class Checklist(BaseModel):
    name: str
    sections: Tuple[ChecklistSection, ...]

    model_config = ConfigDict(frozen=True)

    @property
    def items_total(self) -> int:
        return sum(len(section.items) for section in self.sections)


class ChecklistSummaryOut(BaseModel):
    slug: str
    name: str
    sections_total: int
    items_total: int


class ChecklistDetail(BaseModel):
    slug: str
    name: str
    sections: List[ChecklistSection]
