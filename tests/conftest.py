import pytest
from fastapi.testclient import TestClient

from cleaning_checklist.main import app
from cleaning_checklist.shared.email import EmailDispatchError, get_mailer


class RecordingMailer:
    def __init__(self):
        self.sent = []
        self.error: str | None = None

    def __call__(self, recipient: str, subject: str, html_body: str, text_body: str) -> None:
        if self.error:
            raise EmailDispatchError(self.error)
        self.sent.append(
            {"recipient": recipient, "subject": subject, "html": html_body, "text": text_body}
        )


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(mailer):
    app.dependency_overrides[get_mailer] = lambda: mailer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
