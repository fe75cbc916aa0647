from fastapi import APIRouter, Request, Response
from typing import Any, Dict, List
from app.models.review import NewReview

router = APIRouter()

@router.get("/reviews/{title:path}")
def list_reviews(request: Request, title: str) -> List[Dict[str, Any]]:
    service = request.app.state.catalog_service

    return [
        r.model_dump(by_alias=True, include={"id", "text"})
        for r in service.reviews_for(title)
    ]

@router.post("/reviews", status_code=201)
def create_review(request: Request, body: NewReview) -> Dict[str, Any]:
    service = request.app.state.catalog_service

    review = service.add_review(body)
    return review.model_dump(by_alias=True)

@router.delete("/reviews/{review_id}", status_code=204)
def delete_review(request: Request, review_id: int) -> Response:
    service = request.app.state.catalog_service

    service.delete_review(review_id)
    return Response(status_code=204)
