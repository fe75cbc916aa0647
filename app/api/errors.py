from fastapi import Request
from fastapi.responses import JSONResponse
from app.models.error import ErrorBody
from app.core.exceptions import BackendError

async def backend_error_handler(request: Request, exc: Exception):
    assert isinstance(exc, BackendError)

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorBody(error=exc.message).model_dump()
    )
