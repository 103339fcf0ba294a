# pantry/api/pantry.py

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, HTTPException, Query
from fastapi.responses import JSONResponse

from pantry.db.items import create_shelf_item, delete_shelf_item, list_items
from pantry.db.shelves import (
    create_shelf,
    delete_shelf,
    get_all_shelves,
    save_shelf_name,
)
from pantry.models.forms import (
    CreateShelfItemForm,
    DeleteShelfForm,
    DeleteShelfItemForm,
    SaveShelfNameForm,
)
from pantry.models.pantry import ItemOut, PantryResponse
from pantry.utils.validation import validate_form

router = APIRouter(prefix="/pantry", tags=["pantry"])


def _found(result, detail: str):
    if result is None:
        raise HTTPException(status_code=404, detail=detail)
    return result


def _invalid(errors: Dict[str, str]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": errors})


@router.get("", response_model=PantryResponse)
def load_pantry(
    q: Optional[str] = Query(
        default=None,
        description="Case-insensitive substring of the shelf name",
    ),
) -> PantryResponse:
    """
    Return every shelf matching the search, with its items.
    """
    return PantryResponse(shelves=get_all_shelves(q))


@router.post("")
def pantry_action(payload: Optional[Dict[str, Any]] = Body(default=None)):
    """
    Run one form action, selected by the ``_action`` field of the payload.

    Returns the affected shelf or item, ``{"errors": {...}}`` with status 400
    when the payload does not validate, or null for an unknown action.
    """
    form_data = payload or {}

    action = form_data.get("_action")
    if action == "createShelf":
        return create_shelf()
    if action == "deleteShelf":
        return validate_form(
            form_data,
            DeleteShelfForm,
            lambda data: _found(delete_shelf(data.shelf_id), "Shelf not found"),
            _invalid,
        )
    if action == "saveShelfName":
        return validate_form(
            form_data,
            SaveShelfNameForm,
            lambda data: _found(
                save_shelf_name(data.shelf_id, data.shelf_name), "Shelf not found"
            ),
            _invalid,
        )
    if action == "createShelfItem":
        return validate_form(
            form_data,
            CreateShelfItemForm,
            lambda data: _found(
                create_shelf_item(data.shelf_id, data.item_name), "Shelf not found"
            ),
            _invalid,
        )
    if action == "deleteShelfItem":
        return validate_form(
            form_data,
            DeleteShelfItemForm,
            lambda data: _found(delete_shelf_item(data.item_id), "Item not found"),
            _invalid,
        )
    return None


@router.get("/shelves/{shelf_id}/items", response_model=List[ItemOut])
def get_shelf_items(
    shelf_id: str,
    q: Optional[str] = Query(default=None, description="Case-insensitive substring of the item name"),
) -> List[ItemOut]:
    """
    Confirmed items of one shelf, sorted by name.
    """
    return _found(list_items(shelf_id, q), "Shelf not found")
