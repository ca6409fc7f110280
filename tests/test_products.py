"""Tests for product endpoints and repository."""
import pytest

from inventory_api.models import Category
from inventory_api.repositories.products import ProductRepository
from inventory_api.schemas.product import ProductCreate


class TestProductCreate:
    """Tests for POST /products."""

    def test_create_product_minimal_fields(self, client, auth_headers):
        """Test creating product with only required fields."""
        response = client.post(
            "/products",
            json={"sku": " MIN001 ", "name": " Minimal Product "},
            headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["sku"] == "MIN001"
        assert data["name"] == "Minimal Product"
        assert data["quantity"] == 0
        assert data["is_active"] == 1
        assert data["price"] is None
        assert data["category_id"] is None
        assert data["description"] is None
        assert data["location"] is None
        assert data["created_at"]

    def test_create_product_all_fields(self, client, auth_headers):
        """Test that optional fields are stored as given."""
        category = client.post("/categories", json={"name": "Tools"}, headers=auth_headers).json()

        response = client.post(
            "/products",
            json={
                "sku": "HAM-01",
                "name": "Hammer",
                "description": "  Claw hammer  ",
                "category_id": category["id"],
                "location": "Shelf A3",
                "price": 199.5,
                "quantity": 12,
                "is_active": False
            },
            headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["description"] == "  Claw hammer  "
        assert data["category_id"] == category["id"]
        assert data["location"] == "Shelf A3"
        assert data["price"] == 199.5
        assert data["quantity"] == 12
        assert data["is_active"] == 0

    def test_numeric_strings_are_coerced(self, client, auth_headers):
        """Test that quantity, price and category_id accept numeric strings."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "quantity": "40", "price": "2.25", "category_id": "3"},
            headers=auth_headers
        )

        assert response.status_code == 201
        data = response.json()
        assert data["quantity"] == 40
        assert data["price"] == 2.25
        assert data["category_id"] == 3

    def test_null_price_accepted(self, client, auth_headers):
        """Test that price may be explicitly null."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "price": None},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["price"] is None

    def test_null_quantity_defaults_to_zero(self, client, auth_headers):
        """Test that a null quantity is stored as 0."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "quantity": None},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["quantity"] == 0

    def test_dangling_category_id_accepted(self, client, auth_headers):
        """Test that category_id is not checked against categories."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "category_id": 999},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["category_id"] == 999

    @pytest.mark.parametrize("payload,field", [
        ({"name": "Screws"}, "sku"),
        ({"sku": "", "name": "Screws"}, "sku"),
        ({"sku": "   ", "name": "Screws"}, "sku"),
        ({"sku": 12, "name": "Screws"}, "sku"),
        ({"sku": "S1"}, "name"),
        ({"sku": "S1", "name": "A"}, "name"),
        ({"sku": "S1", "name": "Screws", "quantity": -1}, "quantity"),
        ({"sku": "S1", "name": "Screws", "quantity": 1.5}, "quantity"),
        ({"sku": "S1", "name": "Screws", "quantity": "many"}, "quantity"),
        ({"sku": "S1", "name": "Screws", "price": "abc"}, "price"),
        ({"sku": "S1", "name": "Screws", "price": "inf"}, "price"),
        ({"sku": "S1", "name": "Screws", "category_id": "tools"}, "category_id"),
        ({"sku": "S1", "name": "Screws", "category_id": 2.5}, "category_id"),
        ({"sku": "S1", "name": "Screws", "quantity": 2 ** 64}, "quantity"),
        ({"sku": "S1", "name": "Screws", "category_id": 2 ** 64}, "category_id"),
        ({"sku": "S1", "name": "Screws", "description": {"text": "x"}}, "description"),
        ({"sku": "S1", "name": "Screws", "location": ["A3"]}, "location"),
    ])
    def test_invalid_fields_rejected(self, client, auth_headers, payload, field):
        """Test each validation rule."""
        response = client.post("/products", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["validation_errors"][0]["field"] == field

    def test_largest_storable_quantity(self, client, auth_headers):
        """Test the upper bound of quantity is accepted."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "quantity": 2 ** 63 - 1},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["quantity"] == 2 ** 63 - 1

    @pytest.mark.parametrize("value,stored", [
        (True, 1),
        (False, 0),
        (2, 1),
        (0, 0),
        ("yes please", 1),
        ("", 0),
        (None, 1),
    ])
    def test_is_active_is_coerced_never_rejected(self, client, auth_headers, value, stored):
        """Test that any is_active value becomes a 0/1 flag."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "is_active": value},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["is_active"] == stored

    def test_numeric_text_fields_kept_as_text(self, client, auth_headers):
        """Test that numbers in description and location are stored as their text."""
        response = client.post(
            "/products",
            json={"sku": "S1", "name": "Screws", "description": 42, "location": 3.5},
            headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["description"] == "42"
        assert response.json()["location"] == "3.5"

    def test_rejected_product_not_stored(self, client, auth_headers):
        """Test that a failed validation writes nothing."""
        client.post("/products", json={"sku": "S1", "name": "Screws", "quantity": -1}, headers=auth_headers)

        assert client.get("/products", headers=auth_headers).json() == []

    def test_all_failures_reported_first_one_leads(self, client, auth_headers):
        """Test that every failing field is listed, in rule order."""
        response = client.post(
            "/products",
            json={"name": "A", "quantity": -1, "price": "abc", "category_id": "x"},
            headers=auth_headers
        )

        assert response.status_code == 400
        body = response.json()
        fields = [e["field"] for e in body["validation_errors"]]
        assert fields == ["sku", "name", "quantity", "price", "category_id"]
        assert body["error"].startswith("sku")


class TestProductList:
    """Tests for GET /products."""

    def test_list_empty(self, client, auth_headers):
        """Test listing before any product exists."""
        response = client.get("/products", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_newest_first_with_category_name(self, client, auth_headers):
        """Test ordering and the joined category name."""
        category = client.post("/categories", json={"name": "Tools"}, headers=auth_headers).json()
        client.post("/products", json={"sku": "S1", "name": "Hammer", "category_id": category["id"]}, headers=auth_headers)
        client.post("/products", json={"sku": "S2", "name": "Loose nails"}, headers=auth_headers)

        data = client.get("/products", headers=auth_headers).json()

        assert [p["sku"] for p in data] == ["S2", "S1"]
        assert data[0]["category_name"] is None
        assert data[1]["category_name"] == "Tools"

    def test_deleted_category_leaves_null_name(self, client, auth_headers):
        """Test that a dangling reference lists with a null category name."""
        category = client.post("/categories", json={"name": "Tools"}, headers=auth_headers).json()
        client.post("/products", json={"sku": "S1", "name": "Hammer", "category_id": category["id"]}, headers=auth_headers)

        assert client.delete(f"/categories/{category['id']}", headers=auth_headers).status_code == 204

        data = client.get("/products", headers=auth_headers).json()
        assert data[0]["category_id"] == category["id"]
        assert data[0]["category_name"] is None


class TestProductRepository:
    """Tests for ProductRepository directly."""

    def test_create_returns_stored_row(self, db_session):
        """Test that create re-reads store defaults."""
        repo = ProductRepository(db_session)

        product = repo.create(ProductCreate(sku="S1", name="Hammer"))

        assert product.id is not None
        assert product.created_at is not None
        assert product.quantity == 0
        assert product.is_active == 1

    def test_list_joins_category(self, db_session):
        """Test the left join against categories."""
        category = Category(name="Tools")
        db_session.add(category)
        db_session.commit()

        repo = ProductRepository(db_session)
        repo.create(ProductCreate(sku="S1", name="Hammer", category_id=category.id))
        repo.create(ProductCreate(sku="S2", name="Saw", category_id=category.id + 100))

        items = repo.list()

        assert [(p.sku, p.category_name) for p in items] == [("S2", None), ("S1", "Tools")]
