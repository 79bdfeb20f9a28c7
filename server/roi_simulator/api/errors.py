from typing import Sequence

from fastapi import status
from fastapi.responses import JSONResponse

NOT_FOUND = "Not found"


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_error_response(errors: Sequence[str]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": list(errors)})
