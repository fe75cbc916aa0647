"""
Immutable view models produced by app.core.rendering.

Front ends only read these; they never reach back into UIState.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class MovieCard:
    movie_id: str
    title: str
    heading: str          # "Batman (1989)"
    poster_url: str
    poster_alt: str

@dataclass(frozen=True)
class PageControl:
    page: int
    disabled: bool

@dataclass(frozen=True)
class ReviewEntry:
    review_id: int
    text: str
    label: str            # "Review #3"

@dataclass(frozen=True)
class SearchView:
    heading: str
    keyword: str
    cards: Tuple[MovieCard, ...]
    pagination: Tuple[PageControl, ...]
    error: Optional[str]

@dataclass(frozen=True)
class ReviewView:
    heading: str
    title_heading: str    # "Reviews for: Batman"
    draft: str
    reviews: Tuple[ReviewEntry, ...]
    empty_message: Optional[str]
    error: Optional[str]
