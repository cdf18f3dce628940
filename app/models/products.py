# app/models/products.py
import logging
import re
from typing import List, Optional

from bson import ObjectId

from app.core.error_messages import InvalidRequest
from app.database import PRODUCTS
from app.utils.auth_utils import Identity

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("product", "company", "category")


def owner_scope(requester: Identity) -> dict:
    """Mongo filter restricting non-admins to their own products."""
    if requester.is_admin:
        return {}
    return {"userId": requester.id}


def by_id(product_id: str, requester: Identity) -> Optional[dict]:
    if not ObjectId.is_valid(product_id):
        return None
    return {"_id": ObjectId(product_id), **owner_scope(requester)}


def serialize(product: dict) -> dict:
    product["_id"] = str(product["_id"])
    return product


async def create_product(db, fields: dict, owner_id: str) -> dict:
    product = {
        "product": fields.get("product"),
        "price": fields.get("price"),
        "category": fields.get("category"),
        "company": fields.get("company"),
        "userId": owner_id,
        "image": fields.get("image") or "",
    }
    result = await db[PRODUCTS].insert_one(product)
    product["_id"] = result.inserted_id
    logger.info("Product %s added for user %s", result.inserted_id, owner_id)
    return serialize(product)


async def list_products(db, requester: Identity) -> List[dict]:
    products = await db[PRODUCTS].find(owner_scope(requester)).to_list(None)
    return [serialize(p) for p in products]


async def get_product(db, product_id: str, requester: Identity) -> Optional[dict]:
    query = by_id(product_id, requester)
    if query is None:
        return None
    product = await db[PRODUCTS].find_one(query)
    return serialize(product) if product else None


async def update_product(db, product_id: str, patch: dict, requester: Identity) -> dict:
    if not patch:
        raise InvalidRequest()

    query = by_id(product_id, requester)
    if query is None:
        return {"acknowledged": True, "matchedCount": 0, "modifiedCount": 0, "upsertedId": None, "upsertedCount": 0}

    result = await db[PRODUCTS].update_one(query, {"$set": patch})
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedId": None,
        "upsertedCount": 0,
    }


async def delete_product(db, product_id: str, requester: Identity) -> dict:
    query = by_id(product_id, requester)
    if query is None:
        return {"acknowledged": True, "deletedCount": 0}

    result = await db[PRODUCTS].delete_one(query)
    return {"acknowledged": result.acknowledged, "deletedCount": result.deleted_count}


async def search_products(db, key: str, requester: Identity) -> List[dict]:
    pattern = {"$regex": re.escape(key), "$options": "i"}
    query = {"$or": [{field: pattern} for field in SEARCH_FIELDS], **owner_scope(requester)}
    products = await db[PRODUCTS].find(query).to_list(None)
    return [serialize(p) for p in products]
