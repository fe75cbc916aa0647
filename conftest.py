import httpx
import pytest

from app.core.backend_client import BackendClient
from app.core.catalog_service import CatalogService
from app.core.controller import ViewController
from app.dev_backend import create_app


def movie(imdb_id, title, year="1999", poster="N/A"):
    return {"imdbID": imdb_id, "Title": title, "Year": year, "Poster": poster}


def _fresh(response):
    # a configured response may be served many times, each needs its own object
    return httpx.Response(response.status_code, headers=response.headers, content=response.content)


class FakeBackend:
    """
    httpx.MockTransport handler standing in for the backend.

    Responses are configured per endpoint; every request is recorded.
    """
    def __init__(self):
        self.requests = []
        self.search_response = httpx.Response(200, json={"results": [], "totalResults": "0"})
        self.reviews = {}  # title -> list of {id, reviewText} or an httpx.Response
        self.submit_response = httpx.Response(201, json={})
        self.delete_response = httpx.Response(204)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if request.method == "GET" and path == "/api/search":
            return _fresh(self.search_response)
        if request.method == "GET" and path.startswith("/api/reviews/"):
            title = path[len("/api/reviews/"):]
            found = self.reviews.get(title, [])
            if isinstance(found, httpx.Response):
                return _fresh(found)
            return httpx.Response(200, json=found)
        if request.method == "POST" and path == "/api/reviews":
            return _fresh(self.submit_response)
        if request.method == "DELETE" and path.startswith("/api/reviews/"):
            return _fresh(self.delete_response)
        return httpx.Response(404, json={"error": "no route"})

    def calls(self, method, path_prefix=""):
        return [
            r for r in self.requests
            if r.method == method and r.url.path.startswith(path_prefix)
        ]


class ConfirmStub:
    def __init__(self, answer=True):
        self.answer = answer
        self.prompts = []

    def __call__(self, message):
        self.prompts.append(message)
        return self.answer


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def confirm():
    return ConfirmStub()


@pytest.fixture
async def backend_client(fake_backend):
    client = BackendClient.connect("http://backend.test", transport=httpx.MockTransport(fake_backend))
    yield client
    await client.aclose()


@pytest.fixture
def controller(backend_client, confirm):
    return ViewController(backend_client, confirm=confirm)


@pytest.fixture
def catalog_service():
    service = CatalogService(movies=[
        movie("tt0096895", "Batman", "1989"),
        movie("tt0103776", "Batman Returns", "1992", "https://posters.test/returns.jpg"),
        movie("tt0133093", "The Matrix", "1999"),
    ])
    return service


@pytest.fixture
def dev_app(catalog_service):
    return create_app(catalog_service)
