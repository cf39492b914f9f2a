"""Add, update and delete items on a trip's packing list."""

from typing import Any

from handlers.responses import api_handler, json_response, parse_body, path_param
from trailpack.clients import get_database
from trailpack.errors import ErrorCode, ValidationError
from trailpack.models.requests import AddCustomItemRequest, UpdateItemRequest
from trailpack.services import PackingListMutator


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    trip_id = path_param(event, "tripId")
    mutator = PackingListMutator(get_database().session_factory)
    method = event.get("httpMethod")

    if method == "POST":
        request = parse_body(event, AddCustomItemRequest)
        item = mutator.add_custom_item(trip_id, request.name, request.category, request.qty)
        return json_response(201, item.model_dump(mode="json"))

    item_id = path_param(event, "itemId")

    if method == "PATCH":
        update = parse_body(event, UpdateItemRequest)
        if update.qty is None and update.packed is None and not update.toggle:
            raise ValidationError("Nothing to update", code=ErrorCode.INVALID_REQUEST)
        if update.qty is not None:
            item = mutator.update_quantity(trip_id, item_id, update.qty)
        if update.packed is not None or update.toggle:
            item = mutator.toggle_packed(trip_id, item_id, update.packed)
        return json_response(200, item.model_dump(mode="json"))

    if method == "DELETE":
        mutator.delete_item(trip_id, item_id)
        return {"statusCode": 204}

    raise ValidationError(f"Unsupported method: {method}", code=ErrorCode.INVALID_REQUEST)
