from typing import List
from fastapi import HTTPException, status

from cleaning_checklist.modules.checklist.checklist_catalog import get_checklist, list_checklists
from cleaning_checklist.modules.checklist.checklist_schema import ChecklistDetail, ChecklistSummaryOut


class ChecklistService:
    def list_properties(self) -> List[ChecklistSummaryOut]:
        response: List[ChecklistSummaryOut] = []
        for slug, checklist in list_checklists():
            response.append(
                ChecklistSummaryOut(
                    slug=slug,
                    name=checklist.name,
                    sections_total=len(checklist.sections),
                    items_total=checklist.items_total,
                )
            )
        return response

    def property_detail(self, slug: str) -> ChecklistDetail:
        checklist = get_checklist(slug)
        if not checklist:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found.")

        return ChecklistDetail(slug=slug, name=checklist.name, sections=list(checklist.sections))
