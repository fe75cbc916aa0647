import logging
from time import perf_counter
from typing import List, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from app.config import BACKEND_URL, CONNECT_TIMEOUT_SEC, READ_TIMEOUT_SEC
from app.core.exceptions import (
    ReviewDeleteFailed,
    ReviewsLoadFailed,
    ReviewSubmitFailed,
    SearchFailed,
)
from app.models.movie import SearchResult
from app.models.review import NewReview, Review
from app.models.search_query import SearchQuery

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone; titles are encoded the same way
# browsers do so the backend sees identical paths.
_TITLE_SAFE_CHARS = "!~*'()"

def build_http_client(
        base_url: str = BACKEND_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    timeout = httpx.Timeout(READ_TIMEOUT_SEC, connect=CONNECT_TIMEOUT_SEC)
    return httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

def reviews_path(title: str) -> str:
    return f"/api/reviews/{quote(title, safe=_TITLE_SAFE_CHARS)}"

def search_query(keyword: str, page: int) -> SearchQuery:
    try:
        return SearchQuery(keyword=keyword, page=page)
    except ValidationError as e:
        # e.g. lone surrogates pasted into the terminal
        logger.warning("Cannot build a search for %r: %s", keyword, e)
        raise SearchFailed(details={"keyword": keyword, "page": page}) from e

def new_review(title: str, text: str) -> NewReview:
    try:
        return NewReview(movie_title=title, text=text)
    except ValidationError as e:
        logger.warning("Cannot build a review for %r: %s", title, e)
        raise ReviewSubmitFailed(details={"title": title}) from e

def _error_field(resp: httpx.Response) -> Optional[str]:
    try:
        data = resp.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, str) and error:
            return error
    return None

class BackendClient:
    """
    Async wrapper over the movie/review backend.

    Every method either returns parsed models or raises a RequestFailed
    subclass; httpx and pydantic errors never leak out.
    """
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def connect(cls, base_url: str = BACKEND_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        return cls(build_http_client(base_url, transport=transport))

    async def __aenter__(self) -> "BackendClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.http.aclose()

    async def _send(self, method: str, url: str, failure: type, **kwargs) -> httpx.Response:
        t0 = perf_counter()
        try:
            resp = await self.http.request(method, url, **kwargs)
        except (httpx.HTTPError, UnicodeEncodeError) as e:
            # UnicodeEncodeError: params or body that cannot be sent as UTF-8
            took_ms = round((perf_counter() - t0) * 1000, 2)
            logger.warning("%s %s failed after %sms: %s", method, url, took_ms, type(e).__name__)
            raise failure(details={"url": url, "error": type(e).__name__}) from e

        took_ms = round((perf_counter() - t0) * 1000, 2)
        logger.info("%s %s -> %s (%sms)", method, url, resp.status_code, took_ms)
        return resp

    async def search(self, query: SearchQuery) -> SearchResult:
        resp = await self._send(
            "GET",
            "/api/search",
            SearchFailed,
            params={"q": query.keyword, "page": query.page},
        )
        if not resp.is_success:
            # the backend forwards the provider's own message when it has one
            raise SearchFailed(_error_field(resp), details={"status_code": resp.status_code})

        try:
            return SearchResult.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            logger.warning("Unexpected search payload for %r: %s", query.keyword, e)
            raise SearchFailed(details={"status_code": resp.status_code}) from e

    async def fetch_reviews(self, title: str) -> List[Review]:
        try:
            path = reviews_path(title)
        except UnicodeEncodeError as e:
            logger.warning("Cannot encode review path for %r: %s", title, e)
            raise ReviewsLoadFailed(details={"title": title}) from e

        resp = await self._send("GET", path, ReviewsLoadFailed)
        if not resp.is_success:
            raise ReviewsLoadFailed(details={"status_code": resp.status_code, "title": title})

        try:
            payload = resp.json()
            if not isinstance(payload, list):
                raise ValueError("expected a JSON array of reviews")
            return [Review.model_validate({**item, "movieTitle": title}) for item in payload]
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning("Unexpected review payload for %r: %s", title, e)
            raise ReviewsLoadFailed(details={"title": title}) from e

    async def submit_review(self, review: NewReview) -> None:
        resp = await self._send(
            "POST",
            "/api/reviews",
            ReviewSubmitFailed,
            json=review.model_dump(by_alias=True),
        )
        if not resp.is_success:
            raise ReviewSubmitFailed(details={"status_code": resp.status_code})

    async def delete_review(self, review_id: int) -> None:
        resp = await self._send("DELETE", f"/api/reviews/{review_id}", ReviewDeleteFailed)
        # only "no content" counts, a 200 means the backend did something else
        if resp.status_code != 204:
            raise ReviewDeleteFailed(details={"status_code": resp.status_code, "id": review_id})
