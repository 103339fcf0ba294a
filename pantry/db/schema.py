# pantry/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, String, DateTime, ForeignKey, Index
)

metadata = MetaData()

shelves = Table(
    "shelves",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("created_at", DateTime, nullable=False),
)

items = Table(
    "items",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("shelf_id", String, ForeignKey("shelves.id"), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Index("ix_items_shelf_id", "shelf_id"),
)
