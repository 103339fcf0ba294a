# pantry/models/pantry.py

from typing import List

from pydantic import BaseModel


class ItemOut(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True


class ShelfOut(BaseModel):
    id: str
    name: str
    items: List[ItemOut] = []

    class Config:
        from_attributes = True


class PantryResponse(BaseModel):
    shelves: List[ShelfOut]
