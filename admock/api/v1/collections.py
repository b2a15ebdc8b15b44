"""
Generic read-only access to the JSON database collections

admock/api/v1/collections.py

Registered after every other router so that the specific endpoints win.
"""
import json
from typing import Any
from fastapi import APIRouter, Depends, Request
from admock.api.deps import get_database
from admock.core.database import JsonDatabase
from admock.core.errors import NotFound

router = APIRouter()


def _get_collection(db: JsonDatabase, name: str) -> list:
    items = db.collection(name)
    if items is None:
        raise NotFound(f"Collection '{name}' not found")
    return items


def _as_query_value(value: Any) -> str:
    """Render a stored value the way it would appear in a query string"""
    return value if isinstance(value, str) else json.dumps(value)


@router.get("/{collection}")
async def list_items(collection: str, request: Request, db: JsonDatabase = Depends(get_database)):
    """List a collection, filtered by equality on any query parameter"""
    items = _get_collection(db, collection)
    filters = dict(request.query_params)
    if not filters:
        return items
    return [
        item for item in items
        if isinstance(item, dict)
        and all(_as_query_value(item.get(field)) == value for field, value in filters.items())
    ]


@router.get("/{collection}/{item_id}")
async def get_item(collection: str, item_id: str, db: JsonDatabase = Depends(get_database)):
    for item in _get_collection(db, collection):
        if isinstance(item, dict) and str(item.get("id")) == item_id:
            return item
    raise NotFound(f"{collection} item '{item_id}' not found")
