# tests/test_cart.py
from nursery_api.database.products import ProductDatabase


def test_clear_cart_resets_every_product(client, db, make_products):
    make_products([
        ("Red Rose", "Flowers", 12.5, True),
        ("Aloe Vera", "Succulents", 9.99, True),
        ("Basil", "Herbs", 4.0, False),
    ])
    # a product that never had the flag
    db["products"].insert_one({"title": "Gift Card", "price": 25})

    r = client.post("/clear-cart")
    assert r.status_code == 200
    assert r.json()["message"] == "Cart cleared successfully"

    flags = [p.get("addedToCart") for p in db["products"].find()]
    assert flags == [False, False, False, False]

    in_cart = client.get("/products", params={"addedToCart": "true"}).json()
    assert in_cart["data"] == []


def test_clear_cart_on_empty_catalog(db):
    assert ProductDatabase(db["products"]).clear_cart() == 0
