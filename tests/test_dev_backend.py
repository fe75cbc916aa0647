import json
import pytest
from fastapi.testclient import TestClient
from app.core.catalog_service import CatalogService, DEFAULT_CATALOG_PATH
from app.core.exceptions import InvalidRequestError, MovieNotFoundError, ReviewNotFoundError
from app.dev_backend import create_app
from app.models.review import NewReview


@pytest.fixture
def client(dev_app):
    return TestClient(dev_app)


# -------------------------------
# CatalogService
# -------------------------------

def test_service_search_is_case_insensitive_substring(catalog_service):
    result = catalog_service.search("BATMAN", 1)
    assert [m.title for m in result.items] == ["Batman", "Batman Returns"]
    assert result.total_count == 2

def test_service_search_pages_by_page_size():
    movies = [
        {"imdbID": f"tt{i}", "Title": f"Batman {i}", "Year": "2000", "Poster": "N/A"}
        for i in range(1, 16)
    ]
    service = CatalogService(movies=movies)

    second = service.search("batman", 2)

    assert [m.id for m in second.items] == [f"tt{i}" for i in range(11, 16)]
    assert second.total_count == 15

def test_service_search_errors(catalog_service):
    with pytest.raises(InvalidRequestError):
        catalog_service.search("   ", 1)
    with pytest.raises(MovieNotFoundError):
        catalog_service.search("zzzz", 1)

def test_service_reviews_lifecycle(catalog_service):
    first = catalog_service.add_review(NewReview(movie_title="Batman", text="Great film"))
    catalog_service.add_review(NewReview(movie_title="The Matrix", text="Whoa"))
    third = catalog_service.add_review(NewReview(movie_title="Batman", text="Dark"))

    assert [r.id for r in catalog_service.reviews_for("Batman")] == [first.id, third.id]

    catalog_service.delete_review(first.id)
    assert [r.text for r in catalog_service.reviews_for("Batman")] == ["Dark"]

    with pytest.raises(ReviewNotFoundError):
        catalog_service.delete_review(first.id)

def test_service_rejects_blank_review(catalog_service):
    with pytest.raises(InvalidRequestError):
        catalog_service.add_review(NewReview(movie_title="Batman", text="  "))

def test_bundled_catalog_loads():
    service = CatalogService()
    service.load_data()

    with open(DEFAULT_CATALOG_PATH, "r", encoding="utf-8") as f:
        assert len(service.movies) == len(json.load(f))
    # enough Batman titles to need a second page
    assert service.search("batman", 1).total_count > 10


# -------------------------------
# HTTP endpoints
# -------------------------------

def test_search_endpoint_uses_provider_shape(client):
    resp = client.get("/api/search", params={"q": "batman", "page": 1})

    assert resp.status_code == 200
    body = resp.json()
    assert body["totalResults"] == 2
    assert body["results"][0] == {"imdbID": "tt0096895", "Title": "Batman", "Year": "1989", "Poster": "N/A"}

def test_search_endpoint_errors(client):
    resp = client.get("/api/search", params={"q": ""})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please provide a search keyword."}

    resp = client.get("/api/search", params={"q": "zzzz"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Movie not found!"}

def test_review_endpoints_round_trip(client):
    resp = client.post("/api/reviews", json={"movieTitle": "Batman & Robin", "reviewText": "Ice puns"})
    assert resp.status_code == 201
    review_id = resp.json()["id"]

    resp = client.get("/api/reviews/Batman%20%26%20Robin")
    assert resp.status_code == 200
    assert resp.json() == [{"id": review_id, "reviewText": "Ice puns"}]

    resp = client.delete(f"/api/reviews/{review_id}")
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get("/api/reviews/Batman%20%26%20Robin").json() == []

def test_reviews_for_title_with_slash(client):
    client.post("/api/reviews", json={"movieTitle": "AC/DC: Let There Be Rock", "reviewText": "Loud"})

    resp = client.get("/api/reviews/AC%2FDC%3A%20Let%20There%20Be%20Rock")

    assert [r["reviewText"] for r in resp.json()] == ["Loud"]

def test_unknown_title_has_no_reviews(client):
    assert client.get("/api/reviews/Nothing").json() == []

def test_delete_unknown_review(client):
    resp = client.delete("/api/reviews/999")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Review not found"}

def test_blank_review_rejected(client):
    resp = client.post("/api/reviews", json={"movieTitle": "Batman", "reviewText": " "})
    assert resp.status_code == 400
    assert "error" in resp.json()

def test_lifespan_loads_bundled_catalog():
    with TestClient(create_app()) as client:
        health = client.get("/health").json()

    assert health["status"] == "ok"
    assert health["total_movies"] > 0
