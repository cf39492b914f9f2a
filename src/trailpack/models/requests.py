"""Request bodies accepted by the Lambda handlers."""

from pydantic import BaseModel, Field


class InitializeListRequest(BaseModel):
    force: bool = False


class AddCustomItemRequest(BaseModel):
    name: str
    category: str | None = None
    qty: int = 1


class UpdateItemRequest(BaseModel):
    qty: int | None = None
    packed: bool | None = None
    toggle: bool = False


class AcceptSuggestionRequest(BaseModel):
    library_item_id: str = Field(..., min_length=1)
    reason: str | None = None


class DismissSuggestionRequest(BaseModel):
    library_item_id: str = Field(..., min_length=1)
