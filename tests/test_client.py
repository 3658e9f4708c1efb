import requests

from trip_expense_api.client import TripExpenseAPI


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        if payload is not None:
            self.content = b"x"
        else:
            self.content = text.encode()

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class FakeSession:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def test_create_trip_request_posts_payload():
    session = FakeSession(FakeResponse(201, {"id": "1", "status": "pending"}))
    api = TripExpenseAPI(base_url="http://api.test/", session=session)

    data, error = api.create_trip_request({"employeeName": "Tanaka"})

    assert error is None
    assert data == {"id": "1", "status": "pending"}
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://api.test/api/trip-requests"
    assert call["json"] == {"employeeName": "Tanaka"}


def test_update_status_sends_status_body():
    session = FakeSession(FakeResponse(200, {"id": "1", "status": "approved"}))
    api = TripExpenseAPI(base_url="http://api.test", session=session)

    data, error = api.update_trip_status("1", "approved")

    assert data["status"] == "approved"
    assert session.calls[0]["method"] == "PATCH"
    assert session.calls[0]["url"] == "http://api.test/api/trip-requests/1/status"
    assert session.calls[0]["json"] == {"status": "approved"}


def test_error_message_is_extracted():
    session = FakeSession(FakeResponse(400, {"message": "Trip request not found"}))
    api = TripExpenseAPI(session=session)

    data, error = api.create_expense({"tripRequestId": "nope"})

    assert data is None
    assert error == {"status_code": 400, "message": "Trip request not found"}


def test_delete_expense_no_content():
    session = FakeSession(FakeResponse(204, None, ""), FakeResponse(404, {"message": "Expense not found"}))
    api = TripExpenseAPI(session=session)

    assert api.delete_expense("1") == (True, None)
    ok, error = api.delete_expense("1")
    assert ok is False
    assert error["status_code"] == 404


def test_list_filters_are_sent_as_query_params():
    session = FakeSession(FakeResponse(200, []), FakeResponse(200, [{"id": "e1"}]))
    api = TripExpenseAPI(session=session)

    assert api.list_trip_requests(status="approved") == ([], None)
    assert session.calls[0]["params"] == {"status": "approved"}
    assert api.list_expenses(trip_request_id="t1") == ([{"id": "e1"}], None)
    assert session.calls[1]["params"] == {"tripRequestId": "t1"}


def test_transport_error_is_returned():
    session = FakeSession(requests.ConnectionError("refused"))
    api = TripExpenseAPI(session=session)

    data, error = api.list_expenses()

    assert data == []
    assert error["status_code"] is None
    assert "refused" in error["message"]
    assert api.session is session


def test_health():
    api = TripExpenseAPI(session=FakeSession(FakeResponse(200, {"status": "ok"})))
    assert api.health() is True
