from fastapi import APIRouter

from cleaning_checklist.modules.checklist.checklist_schema import ChecklistDetail, ChecklistSummaryOut
from cleaning_checklist.modules.checklist.checklist_service import ChecklistService

router = APIRouter(prefix="/api/checklists", tags=["Checklist"])


@router.get("", response_model=list[ChecklistSummaryOut])
def list_properties():
    service = ChecklistService()
    return service.list_properties()


@router.get("/{slug}", response_model=ChecklistDetail)
def get_property(slug: str):
    service = ChecklistService()
    return service.property_detail(slug)
