"""Tests for statistics endpoints."""


class TestStatisticsAPI:
    """Test chart data endpoints."""

    def test_week_spending_empty(self, client):
        """No transactions this week: seven zero buckets."""
        response = client.get("/api/v1/statistics/spending", params={"period": "W", "offset": 0})
        assert response.status_code == 200
        data = response.json()
        assert [b["label"] for b in data["buckets"]] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert all(b["total"] == 0 for b in data["buckets"])
        assert data["title"] == "17 Mar - 23 Mar"
        assert data["category_colors"]["Dining"] == "rgba(239, 68, 68, 0.9)"

    def test_income_spending_uses_income_colour(self, client):
        response = client.get("/api/v1/statistics/spending", params={"period": "W", "type": "income"})
        assert response.json()["category_colors"] == {"Salary": "rgba(34, 197, 94, 1)"}

    def test_six_month_spending(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/spending", params={"period": "6M"})
        data = response.json()
        march = data["buckets"][-1]
        assert march["label"] == "Mar"
        assert march["key"] == "2024-03-01"
        assert march["total"] == 70.0
        assert march["per_category"] == {"Food": 50.0, "Dining": 20.0}

    def test_previous_year_is_empty(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/spending", params={"period": "Y", "offset": -1})
        data = response.json()
        assert data["title"] == "2023"
        assert sum(b["total"] for b in data["buckets"]) == 0

    def test_month_spending_has_no_buckets(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/spending", params={"period": "M"})
        assert response.json()["buckets"] == []

    def test_invalid_period(self, client):
        response = client.get("/api/v1/statistics/spending", params={"period": "Q"})
        assert response.status_code == 422

    def test_calendar(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/calendar")
        data = response.json()
        assert data["title"] == "March 2024"
        assert data["leading_blanks"] == 4
        assert data["days"][0]["total"] == 50.0

    def test_net_assets(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/net-assets")
        data = response.json()
        assert len(data["wealth"]) == len(data["investment"]) == 4
        assert data["wealth"][-1]["balance"] == 1930.0
        assert data["investment"][-1]["balance"] == 300.0

    def test_flow(self, client, populated_ledger):
        response = client.get("/api/v1/statistics/flow")
        data = response.json()
        assert len(data) == 12
        assert data[2] == {
            "month": "2024-03-01",
            "label": "Mar",
            "income": 2000.0,
            "expense": 70.0,
            "investment": 300.0,
        }
