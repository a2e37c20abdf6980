"""Tests for categories and budget endpoints."""


class TestCategoriesAPI:
    """Test category endpoints."""

    def test_get_categories(self, client):
        response = client.get("/api/v1/categories")
        assert response.status_code == 200
        data = response.json()
        assert data["expense_categories"] == ["Food", "Dining", "Transport"]
        assert data["budgets"] == {"Food": 200.0}
        assert data["category_colors"]["Food"] == "rgba(239, 68, 68, 1)"

    def test_replace_categories(self, client):
        response = client.put("/api/v1/categories", json={
            "income_categories": ["Wages"],
            "expense_categories": ["Food", "Rent"],
            "investment_categories": [],
        })
        assert response.status_code == 200
        assert response.json()["expense_categories"] == ["Food", "Rent"]

    def test_replace_categories_overlap(self, client):
        response = client.put("/api/v1/categories", json={
            "income_categories": ["Food"],
            "expense_categories": ["Food"],
            "investment_categories": [],
        })
        assert response.status_code == 400

    def test_update_budget(self, client, ledger):
        response = client.put("/api/v1/categories/budgets/Dining", json={"amount": 75})
        assert response.status_code == 200
        assert response.json() == {"category": "Dining", "amount": 75.0}
        assert float(ledger.categories.budget_for("Dining")) == 75.0

    def test_negative_budget(self, client):
        response = client.put("/api/v1/categories/budgets/Dining", json={"amount": -5})
        assert response.status_code == 422


class TestBudgetsAPI:
    """Test budget overview endpoint."""

    def test_overview(self, client, populated_ledger):
        response = client.get("/api/v1/budgets")
        assert response.status_code == 200
        data = response.json()
        assert data["month"] == "2024-03"

        expenses = data["sections"][1]
        assert expenses["title"] == "Expenses"
        food = expenses["comparison"]["per_category"][0]
        assert food == {
            "category": "Food",
            "budget": 200.0,
            "tracked": 50.0,
            "percent_used": 25.0,
            "remaining": 150.0,
        }
        assert expenses["comparison"]["over_budget"] is False
