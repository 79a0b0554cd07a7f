def test_index_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["message"] == "theDev Backend API"
    assert body["docs"]["booking"] == "/api/booking"
    assert body["docs"]["feedback (mock)"] == "/api/feedback/mock"


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "message": "Backend running"}


def test_courses_skip_secondary_header(client):
    r = client.get("/api/courses")
    assert r.status_code == 200
    assert r.json() == [
        {"courseID": "C1", "title": "Intro to Python", "price": "1200"},
        {"courseID": "C2", "title": "Data Analysis", "price": ""},
    ]


def test_courses_with_fewer_than_three_rows_are_empty(client, service):
    service.tabs["Course"] = service.tabs["Course"][:2]
    r = client.get("/api/courses")
    assert r.status_code == 200
    assert r.json() == []

    service.tabs["Course"] = []
    assert client.get("/api/courses").json() == []


def test_courses_upstream_failure_is_generic_500(client, service):
    service.fail_reads["Course"] = RuntimeError("quota exceeded")
    r = client.get("/api/courses")
    assert r.status_code == 500
    assert r.json() == {"error": "Could not load courses"}


def test_courses_without_sheet_id_is_500(unconfigured_client, service):
    r = unconfigured_client.get("/api/courses")
    assert r.status_code == 500
    assert service.calls == []
