from fastapi import FastAPI

from cleaning_checklist.config.settings import settings
from cleaning_checklist.core.errors import register_exception_handlers
from cleaning_checklist.core.logging_config import setup_logging
from cleaning_checklist.core.middleware import RequestLoggingMiddleware
from cleaning_checklist.modules.checklist.checklist_router import router as checklist_router
from cleaning_checklist.modules.submission.submission_router import router as submission_router

setup_logging()

app = FastAPI(title=settings.APP_NAME)
app.add_middleware(RequestLoggingMiddleware)
register_exception_handlers(app)

app.include_router(checklist_router)
app.include_router(submission_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "cleaning-checklist"}
