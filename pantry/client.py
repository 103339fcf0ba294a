# pantry/client.py
"""
Client for the pantry page.

Talks to the API over httpx and keeps one ``OptimisticItems`` per shelf, so
that an added item shows up straight away and is replaced by the confirmed
one on the next ``load()``.

Usage example:
    with httpx.Client(base_url="http://localhost:8000") as http:
        pantry = PantryClient(http)
        pantry.load()
        pantry.add_item(shelf_id, "Milk")
        print(pantry.render())
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Set

import httpx

from pantry.reconciler import ConfirmedSnapshot, OptimisticItems, RenderedItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShelfView:
    id: str
    name: str
    items: List[RenderedItem]

    def deletable_items(self) -> List[RenderedItem]:
        # predicted items have no server id yet
        return [item for item in self.items if not item.is_optimistic]


@dataclass
class ActionResult:
    data: Optional[Dict[str, Any]] = None
    errors: Optional[Dict[str, str]] = None

    @property
    def ok(self) -> bool:
        return self.errors is None


class PantryClient:
    def __init__(self, http: httpx.Client, path: str = "/pantry"):
        self.http = http
        self.path = path
        self.query: Optional[str] = None
        self._shelves: List[Dict[str, Any]] = []
        self._items: Dict[str, OptimisticItems] = {}
        self._version = 0
        self._deleting: Set[str] = set()

    def _reconciler(self, shelf_id: str) -> OptimisticItems:
        if shelf_id not in self._items:
            self._items[shelf_id] = OptimisticItems()
        return self._items[shelf_id]

    def load(self, query: Optional[str] = None) -> None:
        """
        Fetch the shelves and hand each shelf's items to its reconciler as a
        new snapshot. Every load is a new version, which clears predictions.
        """
        self.query = query
        params = {"q": query} if query else None
        resp = self.http.get(self.path, params=params)
        resp.raise_for_status()

        self._shelves = resp.json()["shelves"]
        self._version += 1
        self._deleting = set()

        seen = set()
        for shelf in self._shelves:
            seen.add(shelf["id"])
            self._reconciler(shelf["id"]).observe(
                ConfirmedSnapshot(
                    version=self._version,
                    items=tuple(
                        RenderedItem(id=item["id"], name=item["name"])
                        for item in shelf["items"]
                    ),
                )
            )

        for shelf_id in list(self._items):
            if shelf_id not in seen:
                del self._items[shelf_id]

        logger.debug("Loaded %d shelves (v%d)", len(self._shelves), self._version)

    def _submit(self, action: str, reload: bool = True, **fields: Any) -> ActionResult:
        """
        Post one action. A successful action reloads the shelves, unless
        ``reload`` is off.
        """
        resp = self.http.post(self.path, json={"_action": action, **fields})
        if resp.status_code == 400:
            errors = resp.json()["errors"]
            logger.info("%s rejected: %s", action, errors)
            return ActionResult(errors=errors)
        resp.raise_for_status()
        result = ActionResult(data=resp.json())
        if reload:
            self.load(self.query)
        return result

    def add_item(self, shelf_id: str, name: str) -> ActionResult:
        """
        Show ``name`` on the shelf straight away, then create it on the server.

        Does not reload: the prediction stays visible until the caller runs
        ``load()`` (or another action reloads), which swaps it for the
        confirmed item.
        """
        # the server strips names, so predict the name it will store
        self._reconciler(shelf_id).add_predicted(name.strip())
        return self._submit(
            "createShelfItem", reload=False, shelfId=shelf_id, itemName=name
        )

    def delete_item(self, item_id: str) -> ActionResult:
        return self._submit("deleteShelfItem", itemId=item_id)

    def create_shelf(self) -> ActionResult:
        return self._submit("createShelf")

    def delete_shelf(self, shelf_id: str) -> ActionResult:
        # hidden from the views until the next load
        self._deleting.add(shelf_id)
        return self._submit("deleteShelf", shelfId=shelf_id)

    def rename_shelf(self, shelf_id: str, name: str) -> ActionResult:
        return self._submit("saveShelfName", shelfId=shelf_id, shelfName=name)

    def shelf_views(self) -> List[ShelfView]:
        return [
            ShelfView(
                id=shelf["id"],
                name=shelf["name"],
                items=self._reconciler(shelf["id"]).merged_view(),
            )
            for shelf in self._shelves
            if shelf["id"] not in self._deleting
        ]

    def render(self) -> str:
        lines: List[str] = []
        for view in self.shelf_views():
            lines.append(view.name)
            for item in view.items:
                marker = " (saving...)" if item.is_optimistic else ""
                lines.append(f"  - {item.name}{marker}")
            if not view.items:
                lines.append("  (empty)")
        return "\n".join(lines)
