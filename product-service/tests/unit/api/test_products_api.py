"""
Тесты REST API товаров.

Запросы проходят полный путь Router -> Mediator -> Handler ->
Repository -> SQLite (временный файл, см. фикстуру client).
"""


def create_product(client, name="Keyboard", price=49.9, stock=10):
    response = client.post(
        "/products",
        json={"name": name, "price": price, "stock": stock}
    )
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client):
    """Test health endpoint"""
    response = client.get("/health")
    
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "product-service"


def test_create_product_returns_positive_id(client):
    product_id = create_product(client)
    
    assert isinstance(product_id, int)
    assert product_id > 0


def test_create_product_negative_stock(client):
    response = client.post(
        "/products",
        json={"name": "Keyboard", "price": 49.9, "stock": -1}
    )
    
    assert response.status_code == 400
    assert "detail" in response.json()


def test_create_product_invalid_body(client):
    response = client.post("/products", json={"name": "", "price": -3})
    
    assert response.status_code == 422


def test_get_product(client):
    product_id = create_product(client, name="Mouse", price=9.5, stock=3)
    
    response = client.get(f"/products/{product_id}")
    
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == product_id
    assert data["name"] == "Mouse"
    assert data["price"] == 9.5
    assert data["stock"] == 3


def test_get_missing_product(client):
    response = client.get("/products/9999")
    
    assert response.status_code == 404


def test_list_products(client):
    ids = [create_product(client, name=f"Product {i}") for i in range(3)]
    
    response = client.get("/products", params={"limit": 2, "offset": 0})
    
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert [item["id"] for item in data["items"]] == ids[:2]


def test_list_products_invalid_paging(client):
    response = client.get("/products", params={"limit": 0})
    
    assert response.status_code == 422


def test_update_product(client):
    product_id = create_product(client)
    
    response = client.put(
        f"/products/{product_id}",
        json={"name": "Mechanical Keyboard", "price": 89.0}
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Mechanical Keyboard"
    assert data["price"] == 89.0
    assert data["stock"] == 10


def test_update_missing_product(client):
    response = client.put("/products/9999", json={"name": "X", "price": 1.0})
    
    assert response.status_code == 404


def test_update_stock(client):
    product_id = create_product(client, stock=10)
    
    response = client.patch(f"/products/{product_id}/stock", json={"stock": 25})
    
    assert response.status_code == 200
    assert response.json()["stock"] == 25
    assert client.get(f"/products/{product_id}").json()["stock"] == 25


def test_update_stock_negative_is_rejected(client):
    product_id = create_product(client, stock=10)
    
    response = client.patch(f"/products/{product_id}/stock", json={"stock": -1})
    
    assert response.status_code == 400
    assert client.get(f"/products/{product_id}").json()["stock"] == 10


def test_update_stock_missing_product(client):
    response = client.patch("/products/9999/stock", json={"stock": 1})
    
    assert response.status_code == 404


def test_delete_product(client):
    product_id = create_product(client)
    
    response = client.delete(f"/products/{product_id}")
    
    assert response.status_code == 204
    assert client.get(f"/products/{product_id}").status_code == 404
    assert client.delete(f"/products/{product_id}").status_code == 404


def test_correlation_id_header(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_error_body_uses_error_code(client):
    response = client.get("/products/9999")
    
    body = response.json()
    assert body["error_code"] == "PRODUCT_NOT_FOUND"
    assert body["details"] == {"product_id": 9999}
    assert "detail" in body


def test_negative_stock_error_code(client):
    response = client.post(
        "/products",
        json={"name": "Keyboard", "price": 1.0, "stock": -1}
    )
    
    assert response.json()["error_code"] == "INVALID_STOCK"


def test_out_of_range_id_is_validation_error(client):
    """ID больше 64-битного INTEGER отклоняется до обращения к БД"""
    huge_id = 10**20
    
    assert client.get(f"/products/{huge_id}").status_code == 422
    assert client.put(f"/products/{huge_id}", json={"name": "X", "price": 1.0}).status_code == 422
    assert client.patch(f"/products/{huge_id}/stock", json={"stock": 1}).status_code == 422
    assert client.delete(f"/products/{huge_id}").status_code == 422


def test_largest_id_is_plain_miss(client):
    response = client.get(f"/products/{2**63 - 1}")
    
    assert response.status_code == 404


def test_non_positive_id_is_validation_error(client):
    assert client.get("/products/0").status_code == 422


def test_out_of_range_stock_is_validation_error(client):
    response = client.post(
        "/products",
        json={"name": "Keyboard", "price": 1.0, "stock": 10**20}
    )
    assert response.status_code == 422
    
    product_id = create_product(client)
    response = client.patch(f"/products/{product_id}/stock", json={"stock": 10**20})
    assert response.status_code == 422
    assert client.get(f"/products/{product_id}").json()["stock"] == 10


def test_out_of_range_offset_is_validation_error(client):
    assert client.get("/products", params={"offset": 10**20}).status_code == 422


def test_price_rounded_in_responses(client):
    product_id = create_product(client, price=9.999)
    
    response = client.put(
        f"/products/{product_id}",
        json={"name": "Keyboard", "price": 19.4449}
    )
    
    assert response.json()["price"] == 19.44
    assert client.get(f"/products/{product_id}").json()["price"] == 19.44


def test_unhandled_service_error_is_500(client):
    from app.application.mediator import Mediator
    from app.core.dependencies import get_mediator
    from app.main import app
    
    app.dependency_overrides[get_mediator] = lambda: Mediator()
    try:
        response = client.get("/products/1")
    finally:
        app.dependency_overrides.clear()
    
    assert response.status_code == 500
    assert response.json()["error_code"] == "HANDLER_NOT_REGISTERED"
