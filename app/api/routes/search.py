from fastapi import APIRouter, Request, Query
from typing import Any, Dict

router = APIRouter()

@router.get("/search")
def search(
    request: Request,
    q: str = Query(""),
    page: int = Query(1, ge=1),
) -> Dict[str, Any]:
    service = request.app.state.catalog_service

    result = service.search(q, page)

    # same shape the movie provider answers with
    return result.model_dump(by_alias=True)
