import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from starlette.concurrency import run_in_threadpool

from cleaning_checklist.core.errors import error_response
from cleaning_checklist.modules.submission.submission_schema import ErrorResponse, SubmitResponse
from cleaning_checklist.modules.submission.submission_service import SubmissionService
from cleaning_checklist.shared.email import Mailer, get_mailer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Submission"])


@router.post(
    "/submit",
    response_model=SubmitResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_checklist(request: Request, mailer: Mailer = Depends(get_mailer)):
    # malformed bodies are reported as 500, only missing fields as 400
    service = SubmissionService(mailer)
    try:
        body = await request.json()
        await run_in_threadpool(service.submit, body)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Submit error")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    return SubmitResponse()
