import math
from typing import Iterable, Tuple

from app.config import NO_POSTER, PAGE_SIZE, PLACEHOLDER_POSTER_URL
from app.models.movie import MovieSummary
from app.models.review import Review
from app.models.ui_state import UIState
from app.models.view import MovieCard, PageControl, ReviewEntry, ReviewView, SearchView

APP_HEADING = "Movie Search & Reviews"
EMPTY_REVIEWS_MESSAGE = "No reviews yet. Be the first!"

def poster_url(movie: MovieSummary) -> str:
    if movie.poster_url == NO_POSTER:
        return PLACEHOLDER_POSTER_URL
    return movie.poster_url

def total_pages(total_count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(total_count / page_size)

def pagination_controls(total_count: int, current_page: int) -> Tuple[PageControl, ...]:
    """
    One control per page in ascending order, the current page disabled.
    A single page (or none) gets no controls at all.
    """
    pages = total_pages(total_count)
    if pages <= 1:
        return ()
    return tuple(
        PageControl(page=p, disabled=(p == current_page))
        for p in range(1, pages + 1)
    )

def movie_cards(movies: Iterable[MovieSummary]) -> Tuple[MovieCard, ...]:
    return tuple(
        MovieCard(
            movie_id=m.id,
            title=m.title,
            heading=f"{m.title} ({m.year})",
            poster_url=poster_url(m),
            poster_alt=f"Poster of {m.title}",
        )
        for m in movies
    )

def review_entries(reviews: Iterable[Review]) -> Tuple[ReviewEntry, ...]:
    return tuple(
        ReviewEntry(review_id=r.id, text=r.text, label=f"Review #{r.id}")
        for r in reviews
    )

def render(state: UIState) -> SearchView | ReviewView:
    if state.selected_title is not None:
        entries = review_entries(state.review_list)
        return ReviewView(
            heading=APP_HEADING,
            title_heading=f"Reviews for: {state.selected_title}",
            draft=state.draft_review_text,
            reviews=entries,
            empty_message=None if entries else EMPTY_REVIEWS_MESSAGE,
            error=state.error_message,
        )

    result = state.search_result
    return SearchView(
        heading=APP_HEADING,
        keyword=state.keyword,
        cards=movie_cards(result.items),
        pagination=pagination_controls(result.total_count, state.current_page),
        error=state.error_message,
    )
