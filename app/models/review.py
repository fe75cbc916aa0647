from pydantic import BaseModel, ConfigDict, Field

class Review(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    # not sent by the backend, the title is implied by the request path
    movie_title: str = Field(default="", alias="movieTitle")
    text: str = Field(alias="reviewText")

class NewReview(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_title: str = Field(alias="movieTitle")
    text: str = Field(alias="reviewText")
