"""Suggestions API: GET lists suggestions for a trip, POST accepts or dismisses one."""

from typing import Any

from handlers.responses import api_handler, json_response, parse_body, path_param
from trailpack.clients import get_database
from trailpack.errors import ErrorCode, ValidationError
from trailpack.models.requests import AcceptSuggestionRequest, DismissSuggestionRequest
from trailpack.services import SuggestionManager


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip_id = path_param(event, "tripId")
    manager = SuggestionManager(get_database().session_factory)

    if event.get("httpMethod") != "POST":
        result = manager.compute_suggestions(trip_id)
        return json_response(200, result.model_dump(mode="json"))

    action = path_param(event, "action")
    if action == "accept":
        request = parse_body(event, AcceptSuggestionRequest)
        item = manager.accept_suggestion(trip_id, request.library_item_id, request.reason)
        return json_response(201, item.model_dump(mode="json"))
    if action == "dismiss":
        dismiss = parse_body(event, DismissSuggestionRequest)
        record = manager.dismiss_suggestion(trip_id, dismiss.library_item_id)
        return json_response(200, record.model_dump(mode="json"))

    raise ValidationError(f"Unknown suggestion action: {action}", code=ErrorCode.INVALID_REQUEST)
