from dataclasses import dataclass, field
from typing import List, Optional

from app.models.movie import SearchResult
from app.models.review import Review

@dataclass
class UIState:
    """
    Everything the screen shows. ``selected_title`` alone decides the mode:
    None means search mode, anything else means review mode for that title.
    """
    keyword: str = ""
    current_page: int = 1
    search_result: SearchResult = field(default_factory=SearchResult)
    error_message: Optional[str] = None
    selected_title: Optional[str] = None
    review_list: List[Review] = field(default_factory=list)
    draft_review_text: str = ""

    @property
    def in_review_mode(self) -> bool:
        return self.selected_title is not None
