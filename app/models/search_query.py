from pydantic import BaseModel, Field, field_validator

class SearchQuery(BaseModel):
    keyword: str = Field(
        ...,
        min_length=1,
        description="Search keyword as typed by the user"
    )

    page: int = Field(
        default=1,
        ge=1,
        description="Page number (1-based)"
    )

    @field_validator("keyword")
    @classmethod
    def keyword_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("keyword must not be blank")
        return value
