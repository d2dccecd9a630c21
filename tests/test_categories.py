# tests/test_categories.py
from bson import ObjectId

from nursery_api.database.categories import CategoryDatabase, product_count_pipeline


def seed_categories(db, names):
    result = db["categories"].insert_many([{"name": n, "icon": n.lower()} for n in names])
    return [str(i) for i in result.inserted_ids]


def test_list_categories_counts_products_by_name(client, db, make_products):
    seed_categories(db, ["Flowers", "Succulents", "Bonsai"])
    make_products([
        ("Red Rose", "Flowers", 12.5, False),
        ("Tulip", "Flowers", 8.0, False),
        ("Aloe Vera", "Succulents", 9.99, True),
        ("Mystery Seed", "Uncategorized", 1.0, False),
    ])

    r = client.get("/categories")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] is True

    counts = {c["name"]: c["totalProducts"] for c in body["data"]}
    assert counts == {"Flowers": 2, "Succulents": 1, "Bonsai": 0}

    for category in body["data"]:
        # joined product documents are not returned
        assert "products" not in category
        assert category["icon"] == category["name"].lower()
        assert ObjectId.is_valid(category["_id"])


def test_counts_follow_catalog_changes(client, db, make_products):
    seed_categories(db, ["Herbs"])
    ids = make_products([("Basil", "Herbs", 4.0, False), ("Mint", "Herbs", 3.0, False)])
    client.delete(f"/products/{ids[0]}")
    body = client.get("/categories").json()
    assert body["data"][0]["totalProducts"] == 1


def test_get_category(client, db, make_products):
    ids = seed_categories(db, ["Ferns", "Indoor"])
    make_products([("Boston Fern", "Ferns", 15.0, False)])
    r = client.get(f"/categories/{ids[0]}")
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Ferns"
    assert r.json()["data"]["totalProducts"] == 1

    assert client.get(f"/categories/{ObjectId()}").status_code == 404


def test_create_update_delete_category(client, db):
    r = client.post("/categories", json={"name": "Cacti"})
    assert r.status_code == 200
    category_id = r.json()["insertedId"]

    r = client.put(f"/categories/{category_id}", json={"_id": category_id, "name": "Cactus"})
    assert r.status_code == 200
    assert r.json()["matchedCount"] == 1
    assert db["categories"].find_one({"_id": ObjectId(category_id)})["name"] == "Cactus"

    r = client.delete(f"/categories/{category_id}")
    assert r.status_code == 200
    assert r.json()["deletedCount"] == 1
    assert db["categories"].count_documents({}) == 0


def test_missing_category_writes_are_404(client):
    missing = str(ObjectId())
    assert client.put(f"/categories/{missing}", json={"name": "X"}).status_code == 404
    assert client.delete(f"/categories/{missing}").status_code == 404
    assert client.delete("/categories/123").status_code == 404


def test_pipeline_shape():
    pipeline = product_count_pipeline("products")
    assert pipeline[0]["$lookup"] == {
        "from": "products",
        "localField": "name",
        "foreignField": "category",
        "as": "products",
    }
    oid = ObjectId()
    matched = product_count_pipeline("products", match={"_id": oid})
    assert matched[0] == {"$match": {"_id": oid}}


def test_category_database_directly(db):
    categories = CategoryDatabase(db["categories"])
    created = categories.create_category({"name": "Orchids"})
    assert categories.list_categories()[0]["_id"] == created["insertedId"]
    assert categories.list_categories()[0]["totalProducts"] == 0
