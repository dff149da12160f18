"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

EPOCH_T0 = 1606636800  # 2020-11-29T08:00:00Z
ONE_HOUR = 3600


def store(client: TestClient, meter_id, readings):
    return client.post(
        "/readings/store",
        json={"smartMeterId": meter_id, "electricityReadings": readings},
    )


def two_readings_two_hours_apart():
    return [
        {"time": EPOCH_T0, "reading": 0.5},
        {"time": EPOCH_T0 + 2 * ONE_HOUR, "reading": 1.5},
    ]


class TestInfoEndpoints:
    """Tests for root and health endpoints."""

    def test_api_info(self, client: TestClient) -> None:
        response = client.get("/")
        assert response.status_code == 200
        assert "recommend" in response.json()["endpoints"]

    def test_health_counts_meters_and_plans(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["meters_tracked"] == 1
        assert body["price_plans"] == 3


class TestMeterReadingEndpoints:
    """Tests for storing and reading meter readings."""

    def test_store_then_read(self, client: TestClient) -> None:
        response = store(client, "smart-meter-11", two_readings_two_hours_apart())

        assert response.status_code == 200
        assert response.json() == {
            "message": "Readings Saved",
            "smart_meter_id": "smart-meter-11",
            "readings_stored": 2,
        }

        readings = client.get("/readings/read/smart-meter-11").json()
        assert [r["reading"] for r in readings] == [0.5, 1.5]
        assert readings[0]["time"].startswith("2020-11-29T08:00:00")

    def test_iso_timestamps_are_accepted(self, client: TestClient) -> None:
        response = store(client, "smart-meter-12", [
            {"time": "2024-06-07T12:00:00Z", "reading": 1},
            {"time": "2024-06-07T13:00:00", "reading": 1},
        ])
        assert response.status_code == 200

    def test_read_unknown_meter_is_not_found(self, client: TestClient) -> None:
        assert client.get("/readings/read/smart-meter-1").status_code == 404

    def test_invalid_meter_id_is_bad_request(self, client: TestClient) -> None:
        response = store(client, "meter-11", two_readings_two_hours_apart())

        assert response.status_code == 400
        assert "meter-11" in response.json()["detail"]
        assert client.get("/readings/read/meter-11").status_code == 404

    def test_missing_meter_id_is_bad_request(self, client: TestClient) -> None:
        response = client.post("/readings/store", json={"electricityReadings": two_readings_two_hours_apart()})
        assert response.status_code == 400

    def test_null_reading_is_bad_request_and_stores_nothing(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        response = store(client, "smart-meter-11", [
            {"time": EPOCH_T0 + 3 * ONE_HOUR, "reading": 1.0},
            {"time": EPOCH_T0 + 4 * ONE_HOUR, "reading": None},
        ])

        assert response.status_code == 400
        assert len(client.get("/readings/read/smart-meter-11").json()) == 2

    def test_empty_readings_is_bad_request(self, client: TestClient) -> None:
        assert store(client, "smart-meter-11", []).status_code == 400

    def test_unparseable_body_is_unprocessable(self, client: TestClient) -> None:
        response = store(client, "smart-meter-11", [{"time": "HelloWorld", "reading": "Coding is fun"}])
        assert response.status_code == 422


class TestPricePlanEndpoints:
    """Tests for comparison and recommendation endpoints."""

    def test_compare_all(self, client: TestClient) -> None:
        store(client, "smart-meter-0", two_readings_two_hours_apart())

        response = client.get("/price-plans/compare-all/smart-meter-0")

        assert response.status_code == 200
        assert response.json() == {
            "selectedPlanId": "price-plan-0",
            "costPerPlan": {"price-plan-0": 10.0, "price-plan-1": 2.0, "price-plan-2": 1.0},
        }

    def test_compare_all_without_readings_is_not_found(self, client: TestClient) -> None:
        response = client.get("/price-plans/compare-all/smart-meter-1")

        assert response.status_code == 404
        assert "smart-meter-1" in response.json()["detail"]

    def test_compare_all_with_single_timestamp_is_unprocessable(self, client: TestClient) -> None:
        store(client, "smart-meter-11", [{"time": EPOCH_T0, "reading": 1.0}])

        assert client.get("/price-plans/compare-all/smart-meter-11").status_code == 422

    def test_recommend_all(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        response = client.get("/price-plans/recommend/smart-meter-11")

        assert response.status_code == 200
        assert response.json() == [
            {"planName": "price-plan-2", "cost": 1.0},
            {"planName": "price-plan-1", "cost": 2.0},
            {"planName": "price-plan-0", "cost": 10.0},
        ]

    def test_recommend_with_limit(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        response = client.get("/price-plans/recommend/smart-meter-11", params={"limit": 2})

        assert [r["planName"] for r in response.json()] == ["price-plan-2", "price-plan-1"]

    def test_recommend_limit_equal_to_plan_count(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        response = client.get("/price-plans/recommend/smart-meter-11", params={"limit": 3})

        assert len(response.json()) == 3

    def test_recommend_limit_too_large(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        response = client.get("/price-plans/recommend/smart-meter-11", params={"limit": 4})

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot display more than 3 plan recommendations"

    def test_recommend_limit_zero(self, client: TestClient) -> None:
        store(client, "smart-meter-11", two_readings_two_hours_apart())

        assert client.get("/price-plans/recommend/smart-meter-11", params={"limit": 0}).status_code == 400

    def test_recommend_without_readings_is_not_found(self, client: TestClient) -> None:
        assert client.get("/price-plans/recommend/smart-meter-1").status_code == 404
