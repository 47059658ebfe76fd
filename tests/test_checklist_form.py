import threading

import httpx
import pytest

from cleaning_checklist.modules.checklist.checklist_form import (
    GENERIC_FAILURE,
    NETWORK_FAILURE,
    ChecklistForm,
    SubmitStatus,
)
from cleaning_checklist.modules.checklist.checklist_schema import Checklist, ChecklistSection


def _form() -> ChecklistForm:
    return ChecklistForm(
        Checklist(
            name="Canyon View",
            sections=(
                ChecklistSection(name="Kitchen", items=("Wipe counters", "Empty trash")),
                ChecklistSection(name="Patio", items=("Sweep patio",)),
            ),
        )
    )


def _mock_client(handler) -> httpx.Client:
    return httpx.Client(base_url="http://testserver", transport=httpx.MockTransport(handler))


def test_toggle_item_twice_restores_state() -> None:
    form = _form()
    form.toggle_item(0, 1)
    before = set(form.checked[0])

    form.toggle_item(0, 0)
    form.toggle_item(0, 0)

    assert form.checked[0] == before
    form.toggle_item(0, 1)
    assert form.checked.get(0, set()) == set()


def test_invalid_indices_are_rejected_without_mutation() -> None:
    form = _form()
    with pytest.raises(IndexError):
        form.toggle_item(0, 2)
    with pytest.raises(IndexError):
        form.toggle_item(5, 0)
    with pytest.raises(IndexError):
        form.toggle_section(-1)
    assert form.checked == {}


def test_sections_start_collapsed_and_toggle() -> None:
    form = _form()
    assert form.is_collapsed(0) and form.is_collapsed(1)

    form.toggle_section(0)
    assert not form.is_collapsed(0)
    form.toggle_section(0)
    assert form.is_collapsed(0)


def test_notes_are_stored_verbatim_and_trimmed_on_submit() -> None:
    form = _form()
    form.update_notes(1, "  chair is broken \n")

    assert form.notes[1] == "  chair is broken \n"
    assert form.payload().sections[1].notes == "chair is broken"


def test_section_progress() -> None:
    form = _form()
    form.toggle_item(1, 0)

    assert form.section_progress(1).all_done
    progress = form.section_progress(0)
    assert (progress.done, progress.total, progress.all_done) == (0, 2, False)


def test_unknown_property_cannot_submit(client, mailer) -> None:
    form = ChecklistForm.for_property("lakehouse")

    assert form.view == "not_found"
    assert not form.can_submit
    assert form.submit(client) == SubmitStatus.IDLE
    assert mailer.sent == []


def test_submit_success_against_app(client, mailer) -> None:
    form = ChecklistForm.for_property("canyon-view")
    form.toggle_item(0, 0)
    form.update_notes(0, "low on soap ")

    assert form.submit(client) == SubmitStatus.SUCCESS
    assert form.view == "success"
    assert form.error_message == ""
    assert "low on soap" in mailer.sent[0]["html"]

    # success is terminal
    form.submit(client)
    assert len(mailer.sent) == 1


def test_server_error_then_retry_resends_current_state(client, mailer) -> None:
    form = _form()
    form.toggle_item(0, 0)
    mailer.error = "Daily sending quota exceeded"

    assert form.submit(client) == SubmitStatus.ERROR
    assert form.visible_error == "Daily sending quota exceeded"
    assert form.can_submit

    mailer.error = None
    form.toggle_item(0, 1)
    form.toggle_item(1, 0)
    assert form.submit(client) == SubmitStatus.SUCCESS
    assert "Total:</strong> 3/3 items completed" in mailer.sent[0]["html"]


def test_error_without_message_uses_generic_text() -> None:
    form = _form()
    with _mock_client(lambda request: httpx.Response(500, json={})) as client:
        assert form.submit(client) == SubmitStatus.ERROR
    assert form.error_message == GENERIC_FAILURE


def test_network_failure_uses_network_message() -> None:
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    form = _form()
    with _mock_client(handler) as client:
        assert form.submit(client) == SubmitStatus.ERROR
    assert form.error_message == NETWORK_FAILURE


def test_non_json_response_is_a_network_failure() -> None:
    form = _form()
    with _mock_client(lambda request: httpx.Response(502, text="Bad gateway")) as client:
        form.submit(client)
    assert form.status == SubmitStatus.ERROR
    assert form.error_message == NETWORK_FAILURE


def test_status_is_submitting_while_request_in_flight() -> None:
    form = _form()
    seen = []

    def handler(request):
        seen.append((form.status, form.can_submit))
        # a second submit while the first is running is ignored
        form.submit(client)
        return httpx.Response(200, json={"success": True})

    with _mock_client(handler) as client:
        assert form.submit(client) == SubmitStatus.SUCCESS

    assert seen == [(SubmitStatus.SUBMITTING, False)]


def test_submit_clears_previous_error() -> None:
    form = _form()
    form.status = SubmitStatus.ERROR
    form.error_message = "old"
    messages = []

    def handler(request):
        messages.append(form.error_message)
        return httpx.Response(200, json={"success": True})

    with _mock_client(handler) as client:
        form.submit(client)

    assert messages == [""]
    assert form.visible_error == ""


def test_success_landing_before_slot_is_taken_sends_nothing() -> None:
    form = _form()
    posts = []

    class SlotTakenAfterOtherSubmitSucceeded:
        """Acquire that runs after a concurrent submit has already succeeded."""

        def __init__(self, lock):
            self.lock = lock

        def acquire(self, blocking=True):
            form.status = SubmitStatus.SUCCESS
            return self.lock.acquire(blocking)

        def release(self):
            self.lock.release()

    form._in_flight = SlotTakenAfterOtherSubmitSucceeded(threading.Lock())

    def handler(request):
        posts.append(request)
        return httpx.Response(200, json={"success": True})

    with _mock_client(handler) as client:
        assert form.submit(client) == SubmitStatus.SUCCESS

    assert posts == []
    assert not form._in_flight.lock.locked()
