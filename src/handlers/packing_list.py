"""Packing list handler — GET returns the grouped list, POST (re)initializes it."""

from typing import Any

from handlers.responses import api_handler, json_response, parse_body, path_param
from trailpack.clients import get_database
from trailpack.models.requests import InitializeListRequest
from trailpack.services import ListInitializer, PackingListMutator


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip_id = path_param(event, "tripId")
    session_factory = get_database().session_factory
    initializer = ListInitializer(session_factory)

    if event.get("httpMethod") == "POST":
        request = parse_body(event, InitializeListRequest)
        if request.force:
            result = initializer.force_reinitialize(trip_id)
        else:
            result = initializer.initialize_list(trip_id)
        return json_response(200, result.model_dump(mode="json"))

    # First view of a trip's list populates it
    if initializer.needs_initialization(trip_id):
        initializer.initialize_list(trip_id)

    state = PackingListMutator(session_factory).get_list_state(trip_id)
    return json_response(200, state.model_dump(mode="json"))
