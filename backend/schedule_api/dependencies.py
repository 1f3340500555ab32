"""
Schedule API — Request Body Boundary
=====================================

What:  Decodes a request body (JSON object or form fields) into a Pydantic
       request model before it reaches a handler.
Why:   Clients post either JSON or URL-encoded forms to the same endpoints;
       both must land in the same typed model, and both must fail the same
       way (400 with per-field details) when fields are missing or malformed.
How:   `parse_body(Model)` returns a FastAPI dependency:

           @router.post("/schedule/add")
           async def add(entry: ScheduleEntryCreate = Depends(parse_body(ScheduleEntryCreate))):
               ...
"""

import json
from typing import Any, Awaitable, Callable, Dict, List, Sequence, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from schedule_api.exceptions import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def format_validation_errors(errors: Sequence[Dict[str, Any]]) -> List[Dict[str, str]]:
    """
    Reduce Pydantic/FastAPI error dicts to JSON-safe {field, message} pairs.

    The raw dicts may hold exception objects under "ctx", which the JSON
    encoder cannot serialize.
    """
    formatted = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "path", "query")]
        formatted.append({"field": ".".join(loc), "message": str(err.get("msg", ""))})
    return formatted


async def _read_body(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # Empty form values count as absent so optional integers stay None
        return {
            key: value
            for key, value in form.multi_items()
            if isinstance(value, str) and value != ""
        }

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except ValueError:
        raise ValidationError(message="Request body is not valid JSON")
    if not isinstance(data, dict):
        raise ValidationError(message="Request body must be a JSON object")
    return data


def parse_body(model: Type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that validates the request body against `model`."""

    async def dependency(request: Request) -> ModelT:
        data = await _read_body(request)
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            errors = format_validation_errors(e.errors())
            raise ValidationError(
                message="Invalid request body",
                field=errors[0]["field"] if errors else None,
                context={"errors": errors},
            )

    return dependency
