import itertools
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from app.config import PAGE_SIZE
from app.core.exceptions import InvalidRequestError, MovieNotFoundError, ReviewNotFoundError
from app.models.movie import MovieSummary, SearchResult
from app.models.review import NewReview, Review

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "catalog.json"

class CatalogService:
    """
    In-memory stand-in for the real backend: a fixed movie catalog plus a
    review store that lives as long as the process.
    """
    def __init__(self, movies: Optional[List[dict]] = None, page_size: int = PAGE_SIZE):
        self.movies: List[MovieSummary] = [MovieSummary.model_validate(m) for m in movies or []]
        self.page_size = page_size
        self.reviews: Dict[int, Review] = {}
        self._ids = itertools.count(1)

    def load_data(self, data_path: Path = DEFAULT_CATALOG_PATH):
        with open(data_path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        if not isinstance(raw, list):
            raise Exception("Expected a JSON array at top-level")

        self.movies = [MovieSummary.model_validate(m) for m in raw]
        logger.info("Loaded %d movies from %s", len(self.movies), data_path)

    def search(self, keyword: str, page: int) -> SearchResult:
        needle = keyword.strip().lower()
        if not needle:
            raise InvalidRequestError("Please provide a search keyword.")
        if page < 1:
            raise InvalidRequestError(details={"page": page})

        hits = [m for m in self.movies if needle in m.title.lower()]
        if not hits:
            raise MovieNotFoundError(details={"keyword": keyword})

        start = (page - 1) * self.page_size
        end = start + self.page_size
        return SearchResult(items=hits[start:end], total_count=len(hits))

    def reviews_for(self, title: str) -> List[Review]:
        # ids only grow, so insertion order is creation order
        return [r for r in self.reviews.values() if r.movie_title == title]

    def add_review(self, new: NewReview) -> Review:
        if not new.movie_title.strip() or not new.text.strip():
            raise InvalidRequestError("movieTitle and reviewText are required")

        review = Review(id=next(self._ids), movie_title=new.movie_title, text=new.text)
        self.reviews[review.id] = review
        return review

    def delete_review(self, review_id: int) -> None:
        if review_id not in self.reviews:
            raise ReviewNotFoundError(details={"id": review_id})
        del self.reviews[review_id]

    def health_check(self):
        return {
            "total_movies": len(self.movies),
            "total_reviews": len(self.reviews),
            "status": "ok"
        }
