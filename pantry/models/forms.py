# pantry/models/forms.py
"""
Payload schemas for the pantry actions.

Field aliases are the form field names the page posts (``shelfId``,
``shelfName``, ``itemName``, ``itemId``), so validation errors come back
keyed by those names.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


def _require_text(value: str, message: str) -> str:
    if not value:
        raise PydanticCustomError("blank", message)
    return value


class _Form(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)


class DeleteShelfForm(_Form):
    shelf_id: str = Field(alias="shelfId", min_length=1)


class SaveShelfNameForm(_Form):
    shelf_id: str = Field(alias="shelfId", min_length=1)
    shelf_name: str = Field(alias="shelfName")

    @field_validator("shelf_name")
    @classmethod
    def shelf_name_not_blank(cls, v: str) -> str:
        return _require_text(v, "Shelf name cannot be blank")


class CreateShelfItemForm(_Form):
    shelf_id: str = Field(alias="shelfId", min_length=1)
    item_name: str = Field(alias="itemName")

    @field_validator("item_name")
    @classmethod
    def item_name_not_blank(cls, v: str) -> str:
        return _require_text(v, "Item name cannot be blank")


class DeleteShelfItemForm(_Form):
    item_id: str = Field(alias="itemId", min_length=1)
