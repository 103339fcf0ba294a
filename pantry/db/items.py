# pantry/db/items.py

import logging
from datetime import datetime
from typing import List, Optional
from uuid import uuid4

from sqlalchemy import delete, func, insert, select

from pantry.db.engine import get_engine
from pantry.db.schema import items, shelves
from pantry.models.pantry import ItemOut

logger = logging.getLogger(__name__)


def _shelf_exists(conn, shelf_id: str) -> bool:
    stmt = select(func.count()).select_from(shelves).where(shelves.c.id == shelf_id)
    return conn.execute(stmt).scalar_one() > 0


def list_items(shelf_id: str, query: Optional[str] = None) -> Optional[List[ItemOut]]:
    """
    Confirmed items of one shelf, sorted by name. None if the shelf does not exist.
    """
    stmt = (
        select(items.c.id, items.c.name)
        .where(items.c.shelf_id == shelf_id)
        .order_by(items.c.name)
    )

    query = (query or "").strip()
    if query:
        stmt = stmt.where(
            func.lower(items.c.name).contains(query.lower(), autoescape=True)
        )

    engine = get_engine()
    with engine.connect() as conn:
        if not _shelf_exists(conn, shelf_id):
            return None
        rows = conn.execute(stmt).mappings().all()

    return [ItemOut(id=row["id"], name=row["name"]) for row in rows]


def create_shelf_item(shelf_id: str, name: str) -> Optional[ItemOut]:
    item_id = uuid4().hex
    engine = get_engine()
    with engine.begin() as conn:
        if not _shelf_exists(conn, shelf_id):
            return None
        conn.execute(
            insert(items).values(
                id=item_id,
                name=name,
                shelf_id=shelf_id,
                created_at=datetime.now(),
            )
        )

    logger.info("Created item %s on shelf %s", item_id, shelf_id)
    return ItemOut(id=item_id, name=name)


def delete_shelf_item(item_id: str) -> Optional[ItemOut]:
    engine = get_engine()
    with engine.begin() as conn:
        row = conn.execute(
            select(items.c.id, items.c.name).where(items.c.id == item_id)
        ).mappings().first()
        if row is None:
            return None
        conn.execute(delete(items).where(items.c.id == item_id))

    logger.info("Deleted item %s", item_id)
    return ItemOut(id=row["id"], name=row["name"])
