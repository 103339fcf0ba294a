# pantry/db/shelves.py
"""
Shelf persistence: search, create, rename and delete shelves.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional
from uuid import uuid4

from sqlalchemy import delete, func, insert, select, update

from pantry.db.engine import get_engine
from pantry.db.schema import items, shelves
from pantry.models.pantry import ItemOut, ShelfOut

logger = logging.getLogger(__name__)

DEFAULT_SHELF_NAME = "New Shelf"


def _items_by_shelf(conn, shelf_ids: List[str]) -> Dict[str, List[ItemOut]]:
    grouped: Dict[str, List[ItemOut]] = {shelf_id: [] for shelf_id in shelf_ids}
    if not shelf_ids:
        return grouped

    stmt = (
        select(items.c.id, items.c.name, items.c.shelf_id)
        .where(items.c.shelf_id.in_(shelf_ids))
        .order_by(items.c.name)
    )
    for row in conn.execute(stmt).mappings():
        grouped[row["shelf_id"]].append(ItemOut(id=row["id"], name=row["name"]))
    return grouped


def get_all_shelves(query: Optional[str] = None) -> List[ShelfOut]:
    """
    Return shelves whose name contains ``query`` (case-insensitive),
    newest first, each with its items sorted by name.
    """
    stmt = select(shelves.c.id, shelves.c.name).order_by(shelves.c.created_at.desc())

    query = (query or "").strip()
    if query:
        stmt = stmt.where(
            func.lower(shelves.c.name).contains(query.lower(), autoescape=True)
        )

    engine = get_engine()
    with engine.connect() as conn:
        rows = conn.execute(stmt).mappings().all()
        grouped = _items_by_shelf(conn, [row["id"] for row in rows])

    return [
        ShelfOut(id=row["id"], name=row["name"], items=grouped[row["id"]])
        for row in rows
    ]


def _read_shelf(conn, shelf_id: str) -> Optional[ShelfOut]:
    row = conn.execute(
        select(shelves.c.id, shelves.c.name).where(shelves.c.id == shelf_id)
    ).mappings().first()
    if row is None:
        return None
    grouped = _items_by_shelf(conn, [row["id"]])
    return ShelfOut(id=row["id"], name=row["name"], items=grouped[row["id"]])


def get_shelf(shelf_id: str) -> Optional[ShelfOut]:
    engine = get_engine()
    with engine.connect() as conn:
        return _read_shelf(conn, shelf_id)


def create_shelf() -> ShelfOut:
    shelf_id = uuid4().hex
    engine = get_engine()
    with engine.begin() as conn:
        conn.execute(
            insert(shelves).values(
                id=shelf_id,
                name=DEFAULT_SHELF_NAME,
                created_at=datetime.now(),
            )
        )

    logger.info("Created shelf %s", shelf_id)
    return ShelfOut(id=shelf_id, name=DEFAULT_SHELF_NAME, items=[])


def delete_shelf(shelf_id: str) -> Optional[ShelfOut]:
    """
    Delete a shelf together with its items. Returns the deleted shelf,
    or None if it does not exist.
    """
    engine = get_engine()
    with engine.begin() as conn:
        shelf = _read_shelf(conn, shelf_id)
        if shelf is None:
            return None
        conn.execute(delete(items).where(items.c.shelf_id == shelf_id))
        deleted = conn.execute(
            delete(shelves).where(shelves.c.id == shelf_id)
        ).rowcount

    if deleted == 0:
        return None

    logger.info("Deleted shelf %s (%d items)", shelf_id, len(shelf.items))
    return shelf


def save_shelf_name(shelf_id: str, name: str) -> Optional[ShelfOut]:
    engine = get_engine()
    with engine.begin() as conn:
        updated = conn.execute(
            update(shelves).where(shelves.c.id == shelf_id).values(name=name)
        ).rowcount

    if updated == 0:
        return None

    logger.info("Renamed shelf %s to %r", shelf_id, name)
    return get_shelf(shelf_id)
