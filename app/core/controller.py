import logging
from typing import Callable, Dict, Optional

from app.core.backend_client import BackendClient, new_review, search_query
from app.core.exceptions import RequestFailed
from app.core.rendering import render
from app.models.movie import SearchResult
from app.models.ui_state import UIState
from app.models.view import ReviewView, SearchView

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete this review?"

# request kinds guarded by sequence numbers
SEARCH = "search"
REVIEWS = "reviews"

class ViewController:
    """
    Owns the UIState and every transition on it.

    Network operations are coroutines. None of them raise: a failed request
    ends up in ``state.error_message`` and the view stays usable.

    Overlapping requests of the same kind are resolved by sequence numbers:
    a response is applied only if no newer request of that kind was issued
    after it, whatever order the responses come back in.
    """
    def __init__(self, backend: BackendClient, confirm: Callable[[str], bool]):
        self.backend = backend
        self.confirm = confirm
        self.state = UIState()
        self._issued: Dict[str, int] = {SEARCH: 0, REVIEWS: 0}

    def _issue(self, kind: str) -> int:
        self._issued[kind] += 1
        return self._issued[kind]

    def _is_latest(self, kind: str, token: int) -> bool:
        latest = self._issued[kind]
        if token != latest:
            logger.debug("Dropping stale %s response (token=%s, latest=%s)", kind, token, latest)
            return False
        return True

    # --- input bindings ---

    def set_keyword(self, text: str) -> None:
        self.state.keyword = text

    def set_draft(self, text: str) -> None:
        self.state.draft_review_text = text

    def view(self) -> SearchView | ReviewView:
        return render(self.state)

    # --- search mode ---

    async def search(self, keyword: str, page: int = 1) -> None:
        if not keyword.strip() or page < 1:
            logger.debug("Ignoring search for keyword=%r page=%s", keyword, page)
            return

        state = self.state
        state.keyword = keyword
        state.error_message = None
        state.search_result = SearchResult()

        token = self._issue(SEARCH)
        try:
            result = await self.backend.search(search_query(keyword, page))
        except RequestFailed as exc:
            if self._is_latest(SEARCH, token):
                state.error_message = exc.message
            return

        if self._is_latest(SEARCH, token):
            state.search_result = result
            state.current_page = page

    async def change_page(self, page: int) -> None:
        await self.search(self.state.keyword, page)

    async def select_movie(self, title: str) -> None:
        self.state.selected_title = title
        self.state.draft_review_text = ""
        await self.fetch_reviews(title)

    def back(self) -> None:
        self.state.selected_title = None

    # --- review mode ---

    async def fetch_reviews(self, title: str) -> None:
        token = self._issue(REVIEWS)
        try:
            reviews = await self.backend.fetch_reviews(title)
        except RequestFailed as exc:
            # the previous list stays on screen
            if self._is_latest(REVIEWS, token):
                self.state.error_message = exc.message
            return

        if self._is_latest(REVIEWS, token):
            self.state.review_list = reviews

    async def submit_review(self, text: Optional[str] = None) -> None:
        state = self.state
        if text is None:
            text = state.draft_review_text
        else:
            state.draft_review_text = text

        title = state.selected_title
        if title is None or not text.strip():
            logger.debug("Ignoring review submission for title=%r", title)
            return

        state.error_message = None
        try:
            await self.backend.submit_review(new_review(title, text))
        except RequestFailed as exc:
            state.error_message = exc.message
            return

        # another title's draft is left alone if the user moved on meanwhile
        if state.selected_title == title:
            state.draft_review_text = ""
        await self._refresh_reviews()

    async def delete_review(self, review_id: int) -> None:
        if not self.confirm(DELETE_PROMPT):
            logger.debug("Deletion of review %s declined", review_id)
            return

        try:
            await self.backend.delete_review(review_id)
        except RequestFailed as exc:
            self.state.error_message = exc.message
            return

        await self._refresh_reviews()

    async def _refresh_reviews(self) -> None:
        # the user may have left review mode while the request was in flight
        if self.state.selected_title is not None:
            await self.fetch_reviews(self.state.selected_title)
