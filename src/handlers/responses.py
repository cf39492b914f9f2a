"""Shared API Gateway proxy response helpers for the packing handlers."""

import functools
import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import pydantic

from trailpack.errors import ErrorCode, NotFoundError, TrailPackError, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)
Handler = Callable[[dict[str, Any], object], dict[str, Any]]


def json_response(status_code: int, body: Any) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def error_response(error: TrailPackError) -> dict[str, Any]:
    if isinstance(error, NotFoundError):
        status = 404
    elif isinstance(error, ValidationError):
        status = 400
    else:
        status = 500
    return json_response(status, {"error": error.code.value, "message": error.user_message})


def parse_body(event: dict[str, Any], model: type[ModelT]) -> ModelT:
    raw = event.get("body") or "{}"
    try:
        return model.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise ValidationError(f"Invalid request body: {e}", code=ErrorCode.INVALID_REQUEST) from e


def path_param(event: dict[str, Any], name: str) -> str:
    value = (event.get("pathParameters") or {}).get(name)
    if not value:
        raise ValidationError(f"Missing path parameter: {name}", code=ErrorCode.INVALID_REQUEST)
    return value


def api_handler(func: Handler) -> Handler:
    """Translate engine errors into JSON error responses. Never lets an exception escape."""

    @functools.wraps(func)
    def wrapper(event: dict[str, Any], context: object) -> dict[str, Any]:
        try:
            return func(event, context)
        except TrailPackError as e:
            logger.info("Request failed with %s: %s", e.code.value, e.message)
            return error_response(e)
        except Exception:
            logger.exception("Unhandled error in %s", func.__module__)
            return error_response(TrailPackError("Unhandled error"))

    return wrapper
