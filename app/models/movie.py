from pydantic import BaseModel, ConfigDict, Field
from typing import List

class MovieSummary(BaseModel):
    """One search hit, as the movie provider describes it."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(alias="imdbID")
    title: str = Field(alias="Title")
    year: str = Field(alias="Year")
    poster_url: str = Field(alias="Poster")

class SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[MovieSummary] = Field(default_factory=list, alias="results")
    # the provider sends this as a numeric string; pydantic coerces it
    total_count: int = Field(default=0, ge=0, alias="totalResults")
