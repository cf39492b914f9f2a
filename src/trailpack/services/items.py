"""CRUD over a trip's packing items and the grouped view used for display."""

import logging
from collections.abc import Iterable

from sqlalchemy.orm import Session, sessionmaker

from trailpack.catalog import Catalog, default_catalog
from trailpack.db.repository import PackingRepository
from trailpack.errors import ErrorCode, ValidationError
from trailpack.models.packing import CategoryGroup, PackingItemSource, PackingListState, TripPackingItem

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY_ORDER = 999


def _validate_qty(qty: int) -> int:
    if isinstance(qty, bool) or not isinstance(qty, int) or qty < 1:
        raise ValidationError(f"Quantity must be an integer >= 1, got {qty!r}", code=ErrorCode.INVALID_QUANTITY)
    return qty


def group_items_by_category(items: Iterable[TripPackingItem], catalog: Catalog) -> list[CategoryGroup]:
    """Bucket items by category, ordered by the catalog's sort order. Unknown ids keep their raw id as label."""
    buckets: dict[str, list[TripPackingItem]] = {}
    for item in items:
        buckets.setdefault(item.category_id, []).append(item)

    groups = []
    for category_id, bucket in buckets.items():
        category = catalog.get_category(category_id)
        groups.append(
            CategoryGroup(
                category_id=category_id,
                label=category.label if category else category_id,
                icon=category.icon if category else None,
                sort_order=category.sort_order if category else UNKNOWN_CATEGORY_ORDER,
                items=bucket,
                packed_count=sum(1 for item in bucket if item.packed),
                total_count=len(bucket),
            )
        )
    groups.sort(key=lambda group: (group.sort_order, group.label))
    return groups


class PackingListMutator:
    def __init__(self, session_factory: sessionmaker[Session], catalog: Catalog | None = None) -> None:
        self._session_factory = session_factory
        self._catalog = catalog or default_catalog()

    def list_items(self, trip_id: str) -> list[TripPackingItem]:
        with self._session_factory() as session:
            repo = PackingRepository(session)
            repo.get_trip(trip_id)
            return [TripPackingItem.model_validate(row) for row in repo.list_items(trip_id)]

    def add_custom_item(
        self,
        trip_id: str,
        name: str,
        category: str | None = None,
        qty: int = 1,
    ) -> TripPackingItem:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Custom item name is empty", code=ErrorCode.EMPTY_ITEM_NAME)
        _validate_qty(qty)
        category_id = self._catalog.normalize_category_id(category)

        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            repo.get_trip(trip_id)
            row = repo.add_item(
                trip_id,
                name=name,
                category_id=category_id,
                qty=qty,
                source=PackingItemSource.USER.value,
            )
            return TripPackingItem.model_validate(row)

    def toggle_packed(self, trip_id: str, item_id: str, packed: bool | None = None) -> TripPackingItem:
        """Flip the packed flag, or set it explicitly when ``packed`` is given."""
        with self._session_factory.begin() as session:
            row = PackingRepository(session).get_item(trip_id, item_id)
            row.packed = (not row.packed) if packed is None else packed
            session.flush()
            return TripPackingItem.model_validate(row)

    def update_quantity(self, trip_id: str, item_id: str, qty: int) -> TripPackingItem:
        _validate_qty(qty)
        with self._session_factory.begin() as session:
            row = PackingRepository(session).get_item(trip_id, item_id)
            row.qty = qty
            session.flush()
            return TripPackingItem.model_validate(row)

    def delete_item(self, trip_id: str, item_id: str) -> None:
        with self._session_factory.begin() as session:
            repo = PackingRepository(session)
            repo.delete_item(repo.get_item(trip_id, item_id))
        logger.info("Deleted packing item %s from trip %s", item_id, trip_id)

    def group_items_by_category(self, items: Iterable[TripPackingItem]) -> list[CategoryGroup]:
        return group_items_by_category(items, self._catalog)

    def get_list_state(self, trip_id: str) -> PackingListState:
        with self._session_factory() as session:
            repo = PackingRepository(session)
            trip = repo.get_trip(trip_id)
            items = [TripPackingItem.model_validate(row) for row in repo.list_items(trip_id)]
            is_initialized = trip.packing_list_initialized
            version = trip.packing_list_version

        return PackingListState(
            trip_id=trip_id,
            is_initialized=is_initialized,
            version=version,
            categories=self.group_items_by_category(items),
            total_items=len(items),
            packed_items=sum(1 for item in items if item.packed),
        )
