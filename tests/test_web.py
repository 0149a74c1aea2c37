"""Tests for the web API."""


def ids(rows):
    return [r["id"] for r in rows]


class TestCustomersApi:
    """Tests for customer routes."""

    def test_list_default_sort(self, client):
        response = client.get("/customers")

        assert response.status_code == 200
        assert ids(response.json()) == ["c5", "c1", "c3", "c2", "c4"]

    def test_list_search(self, client):
        assert ids(client.get("/customers", params={"search": "doe"}).json()) == ["c1"]
        assert client.get("/customers", params={"search": "zzz"}).json() == []

    def test_list_descending(self, client):
        response = client.get("/customers", params={"sort": "last_name", "order": "desc"})
        assert ids(response.json()) == ["c4", "c2", "c3", "c1", "c5"]

    def test_list_sort_by_city(self, client):
        response = client.get("/customers", params={"sort": "city"})

        assert response.status_code == 200
        assert ids(response.json()) == ["c1", "c5", "c4", "c3", "c2"]

    def test_list_bad_sort_field(self, client):
        assert client.get("/customers", params={"sort": "password"}).status_code == 422

    def test_list_bad_order(self, client):
        assert client.get("/customers", params={"order": "up"}).status_code == 422

    def test_get(self, client):
        response = client.get("/customers/c2")

        assert response.status_code == 200
        assert response.json()["last_name"] == "Smith"

    def test_get_unknown(self, client):
        assert client.get("/customers/nope").status_code == 404

    def test_add(self, client, state):
        response = client.post(
            "/customers",
            json={
                "first_name": "Ann",
                "last_name": "Lee",
                "email": "ann@example.com",
                "phone": "555-000-1111",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"]
        assert body["address"] == ""
        assert state.customers.get(body["id"]).first_name == "Ann"

    def test_add_missing_field(self, client, state):
        response = client.post(
            "/customers",
            json={"first_name": "", "last_name": "Lee", "email": "a@b.c", "phone": "1"},
        )

        assert response.status_code == 422
        assert len(state.customers) == 5

    def test_add_blank_field_rejected_by_core(self, client, state):
        response = client.post(
            "/customers",
            json={"first_name": "   ", "last_name": "Lee", "email": "a@b.c", "phone": "1"},
        )

        assert response.status_code == 422
        assert "first_name" in response.json()["detail"]
        assert len(state.customers) == 5

    def test_update(self, client, state):
        response = client.put(
            "/customers/c1",
            json={
                "first_name": "Johnny",
                "last_name": "Doe",
                "email": "johnny@example.com",
                "phone": "555-123-4567",
                "city": "Newtown",
            },
        )

        assert response.status_code == 200
        assert state.customers.get("c1").first_name == "Johnny"
        assert state.customers.get("c1").address == ""
        assert state.customers.list_all()[0].id == "c1"

    def test_update_unknown(self, client):
        response = client.put(
            "/customers/nope",
            json={"first_name": "A", "last_name": "B", "email": "c", "phone": "d"},
        )
        assert response.status_code == 404

    def test_delete_requires_confirmation(self, client, state):
        response = client.delete("/customers/c1")

        assert response.status_code == 200
        assert response.json()["status"] == "cancelled"
        assert state.customers.get("c1") is not None

    def test_delete_confirmed_keeps_trainings(self, client, state):
        response = client.delete("/customers/c1", params={"confirm": "true"})

        assert response.json()["status"] == "deleted"
        assert state.customers.get("c1") is None

        trainings = client.get("/trainings").json()
        assert len(trainings) == 7
        assert trainings[0]["id"] == "t1"
        assert trainings[0]["customer_name"] == "Unknown"

    def test_delete_unknown(self, client):
        assert client.delete("/customers/nope", params={"confirm": "true"}).status_code == 404

    def test_export(self, client):
        response = client.get("/customers/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="customers.csv"' in response.headers["content-disposition"]
        assert response.text.startswith("First Name,Last Name,Email,Phone,Address,City\n")
        assert len(response.text.splitlines()) == 6

    def test_export_filename(self, client):
        response = client.get("/customers/export", params={"filename": "all.csv"})
        assert 'filename="all.csv"' in response.headers["content-disposition"]
        assert len(response.text.splitlines()) == 6

    def test_export_filename_with_quote(self, client):
        response = client.get("/customers/export", params={"filename": 'a"b.csv'})
        header = response.headers["content-disposition"]

        assert response.status_code == 200
        assert header == "attachment; filename=\"a\\\"b.csv\"; filename*=UTF-8''a%22b.csv"

    def test_export_filename_non_ascii(self, client):
        response = client.get("/customers/export", params={"filename": "kunden_ü.csv"})
        header = response.headers["content-disposition"]

        assert 'filename="kunden_?.csv"' in header
        assert "filename*=UTF-8''kunden_%C3%BC.csv" in header

    def test_export_filename_multiline_rejected(self, client):
        response = client.get("/customers/export", params={"filename": "a\nb.csv"})
        assert response.status_code == 422


class TestTrainingsApi:
    """Tests for training routes."""

    def test_list_includes_customer_name(self, client):
        rows = client.get("/trainings").json()

        assert ids(rows) == ["t1", "t2", "t3", "t4", "t5", "t6", "t7"]
        assert rows[0]["customer_name"] == "John Doe"
        assert rows[0]["date"] == "2025-04-15T10:30:00"

    def test_sort_by_customer(self, client):
        rows = client.get("/trainings", params={"sort": "customer"}).json()
        assert ids(rows) == ["t2", "t6", "t1", "t3", "t7", "t4", "t5"]

    def test_search(self, client):
        rows = client.get("/trainings", params={"search": "jane"}).json()
        assert ids(rows) == ["t2", "t6"]

    def test_bad_sort_field(self, client):
        assert client.get("/trainings", params={"sort": "customer_id"}).status_code == 422

    def test_activities(self, client):
        activities = client.get("/trainings/activities").json()
        assert activities[0] == "Running"
        assert len(activities) == 10

    def test_add(self, client, state):
        response = client.post(
            "/trainings",
            json={
                "date": "2025-05-01T09:00",
                "activity": "Pilates",
                "duration": 50,
                "customer_id": "c2",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["customer_name"] == "Jane Smith"
        assert body["date"] == "2025-05-01T09:00:00"
        assert len(state.trainings) == 8

    def test_add_date_only(self, client):
        response = client.post(
            "/trainings",
            json={"date": "2025-05-01", "activity": "Yoga", "customer_id": "c1"},
        )

        assert response.status_code == 201
        assert response.json()["date"] == "2025-05-01T00:00:00"
        assert response.json()["duration"] == 30

    def test_add_space_separated_date(self, client):
        response = client.post(
            "/trainings",
            json={"date": "2025-05-01 09:15:00", "activity": "Yoga", "customer_id": "c1"},
        )

        assert response.status_code == 201
        assert response.json()["date"] == "2025-05-01T09:15:00"

    def test_add_rejects_zero_duration(self, client, state):
        response = client.post(
            "/trainings",
            json={"date": "2025-05-01T09:00", "activity": "Yoga", "duration": 0, "customer_id": "c1"},
        )

        assert response.status_code == 422
        assert len(state.trainings) == 7

    def test_add_rejects_unknown_customer(self, client):
        response = client.post(
            "/trainings",
            json={"date": "2025-05-01T09:00", "activity": "Yoga", "duration": 30, "customer_id": "zz"},
        )
        assert response.status_code == 422

    def test_add_rejects_bad_date(self, client):
        response = client.post(
            "/trainings",
            json={"date": "soon", "activity": "Yoga", "duration": 30, "customer_id": "c1"},
        )
        assert response.status_code == 422

    def test_delete(self, client, state):
        assert client.delete("/trainings/t3").json()["status"] == "cancelled"
        assert state.trainings.get("t3") is not None

        assert client.delete("/trainings/t3", params={"confirm": "true"}).json()["status"] == "deleted"
        assert state.trainings.get("t3") is None

    def test_get_unknown(self, client):
        assert client.get("/trainings/nope").status_code == 404


class TestCalendarAndStatsApi:
    """Tests for calendar and statistics routes."""

    def test_calendar_all(self, client):
        events = client.get("/calendar").json()

        assert len(events) == 7
        assert events[0] == {
            "id": "t1",
            "title": "Running – John Doe",
            "start": "2025-04-15T10:30:00",
            "end": "2025-04-15T11:00:00",
        }

    def test_calendar_week(self, client):
        events = client.get("/calendar", params={"view": "week", "day": "2025-04-15"}).json()
        assert ids(events) == ["t1", "t2", "t3", "t4", "t5", "t6"]

    def test_calendar_day(self, client):
        events = client.get("/calendar", params={"view": "day", "day": "2025-04-21"}).json()
        assert ids(events) == ["t7"]

    def test_calendar_bad_view(self, client):
        assert client.get("/calendar", params={"view": "year"}).status_code == 422

    def test_stats(self, client):
        data = client.get("/stats").json()

        assert data["total_activities"] == 5
        assert data["total_minutes"] == 360
        assert data["most_popular"] == {"name": "Yoga", "minutes": 135}


class TestAppRoutes:
    """Tests for app-level routes."""

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_root_redirects(self, client):
        response = client.get("/", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/customers"
