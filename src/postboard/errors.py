"""Exception handlers registered on the app.

Learn: FastAPI answers body validation failures with 422 by default.
Here a missing body or a missing/empty required field is a plain bad
request, so it is answered with 400 and the same {"detail": ...} shape
as every other error.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def _describe(errors: list[dict]) -> str:
    if not errors:
        return "Invalid Request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    if not loc:
        return "Missing Body"
    return f"Invalid {'.'.join(loc)}: {first.get('msg', 'invalid value')}"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": _describe(exc.errors())})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
