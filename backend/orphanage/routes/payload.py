"""
Orphanage API — Raw Request Body Handling
==========================================

What:  Reads a JSON request body as a plain dict and documents it in OpenAPI.
Why:   Write handlers must forward whatever fields the client sent straight
       to the store. Declaring a Pydantic body parameter would make FastAPI
       validate it and answer 422 before the store ever sees the request.
How:   `read_fields` is a dependency that parses the body without checking
       it; `json_body_schema` puts the documented model into the OpenAPI
       requestBody via `openapi_extra`.

Body handling:
    empty body           → {}  (every column binds NULL, store rejects → 400)
    JSON object          → forwarded as-is
    other JSON value     → {}  (same as an empty body)
    invalid JSON         → MalformedBodyError (400)
    NaN, Infinity, 1e400 → MalformedBodyError (400)
"""

import json
import math
from typing import Any, Dict, Type

from fastapi import Request
from pydantic import BaseModel

from orphanage.exceptions import MalformedBodyError


def _reject_constant(token: str) -> Any:
    # Infinity, -Infinity and NaN are not JSON and cannot be rendered back out
    raise ValueError(f"Non-standard JSON token: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {token}")
    return value


async def read_fields(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except ValueError as e:
        raise MalformedBodyError(context={"error": str(e)})
    if not isinstance(payload, dict):
        return {}
    return payload


def json_body_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """Build an `openapi_extra` entry documenting `model` as the JSON request body."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": model.model_json_schema()},
            },
        }
    }
