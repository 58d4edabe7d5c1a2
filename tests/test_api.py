import hashlib

from fastapi.testclient import TestClient

from item_catalog.main import app
from item_catalog.services.image_service import ImageStore, get_image_store

B1 = b"\xff\xd8\xff\xe0shirt-photo"


def _post_item(client: TestClient, name: str, category: str, data: bytes = B1):
    return client.post(
        "/items",
        data={"name": name, "category": category},
        files={"image": ("photo.jpg", data, "image/jpeg")},
    )


def test_root(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Hello, world!"}


def test_create_list_and_get_item(client: TestClient) -> None:
    reference = hashlib.sha256(B1).hexdigest() + ".jpg"

    created = _post_item(client, "shirt", "clothes")

    assert created.status_code == 200
    body = created.json()
    assert body["message"] == "item received: shirt, clothes"
    assert body["item"] == {"id": 1, "name": "shirt", "category": "clothes", "image": reference}

    listing = client.get("/items")
    assert listing.status_code == 200
    assert listing.json() == {"items": [body["item"]]}

    single = client.get("/items/1")
    assert single.status_code == 200
    assert single.json() == body["item"]


def test_second_upload_reuses_category_and_image(client: TestClient, stored_images) -> None:
    first = _post_item(client, "shirt", "clothes").json()["item"]
    second = _post_item(client, "shirt", "Clothes").json()["item"]

    assert second["category"] == "clothes"
    assert second["image"] == first["image"]
    assert stored_images() == [first["image"]]
    assert client.get("/categories/").json() == [{"id": 1, "name": "clothes"}]
    assert len(client.get("/items").json()["items"]) == 2


def test_unknown_item_is_404(client: TestClient) -> None:
    response = client.get("/items/42")

    assert response.status_code == 404
    assert response.json() == {"detail": "Item with that ID was not found"}


def test_missing_image_is_400(client: TestClient) -> None:
    response = client.post("/items", data={"name": "shirt", "category": "clothes"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Image not found"}


def test_empty_name_is_400_and_nothing_is_written(client: TestClient, stored_images) -> None:
    response = _post_item(client, "", "clothes")

    assert response.status_code == 400
    assert client.get("/items").json() == {"items": []}
    assert client.get("/categories/").json() == []
    assert stored_images() == []


def test_search(client: TestClient) -> None:
    _post_item(client, "Blue Shirt", "clothes", b"1")
    _post_item(client, "hat", "hats", b"2")

    hits = client.get("/search", params={"keyword": "shirt"})
    everything = client.get("/search", params={"keyword": ""})
    no_keyword = client.get("/search")
    nothing = client.get("/search", params={"keyword": "zzz-no-match"})

    assert [i["name"] for i in hits.json()["items"]] == ["Blue Shirt"]
    assert len(everything.json()["items"]) == 2
    assert len(no_keyword.json()["items"]) == 2
    assert nothing.status_code == 200
    assert nothing.json() == {"items": []}


def test_image_is_served(client: TestClient) -> None:
    reference = _post_item(client, "shirt", "clothes").json()["item"]["image"]

    response = client.get(f"/image/{reference}")

    assert response.status_code == 200
    assert response.content == B1


def test_missing_or_malformed_image_serves_placeholder(client: TestClient, image_store: ImageStore) -> None:
    placeholder = image_store.default_path.read_bytes()

    for reference in ["nothere.jpg", "abc123.png", "abc123"]:
        response = client.get(f"/image/{reference}")
        assert response.status_code == 200
        assert response.content == placeholder


def test_item_id_outside_integer_range_is_404(client: TestClient) -> None:
    _post_item(client, "shirt", "clothes")

    response = client.get(f"/items/{2 ** 70}")

    assert response.status_code == 404
    assert response.json() == {"detail": "Item with that ID was not found"}


def test_malformed_image_reference_is_400(client: TestClient, tmp_path) -> None:
    class _EscapingStore(ImageStore):
        def store(self, image) -> str:
            return "../escape.jpg"

    app.dependency_overrides[get_image_store] = lambda: _EscapingStore(tmp_path / "other")

    response = _post_item(client, "shirt", "clothes")

    assert response.status_code == 400
    assert client.get("/items").json() == {"items": []}
    assert client.get("/categories/").json() == []
