# app/routes/products.py
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from pymongo.errors import PyMongoError

from app.core.error_messages import ErrorResponses, InternalFailure
from app.database import get_db
from app.middleware.rbac import get_current_user
from app.models.products import (
    create_product,
    delete_product,
    get_product,
    list_products,
    search_products,
    update_product,
)
from app.schemas.products import DeleteOutcome, ProductOut, ProductUpdate, UpdateOutcome
from app.utils.auth_utils import Identity

logger = logging.getLogger(__name__)

product_router = APIRouter(tags=["Products"], dependencies=[Depends(get_current_user)])


@product_router.post("/add-product", response_model=ProductOut)
async def add_product(
    request: Request,
    product: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    userId: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    user: Identity = Depends(get_current_user),
    db=Depends(get_db),
):
    # Admins may add on behalf of another user
    owner_id = userId if (user.is_admin and userId) else user.id
    fields = {"product": product, "price": price, "category": category, "company": company}
    try:
        if image is not None and image.filename:
            fields["image"] = request.app.state.storage.store(await image.read(), image.filename)
        return await create_product(db, fields, owner_id)
    except (PyMongoError, OSError) as e:
        logger.error("Error in /add-product: %s", e)
        raise InternalFailure(error=str(e))


@product_router.get("/products", response_model=List[ProductOut])
async def get_products(user: Identity = Depends(get_current_user), db=Depends(get_db)):
    return await list_products(db, user)


@product_router.get("/product/{product_id}")
async def get_single_product(product_id: str, user: Identity = Depends(get_current_user), db=Depends(get_db)):
    product = await get_product(db, product_id, user)
    if product is None:
        return {"result": ErrorResponses.NO_RECORD_FOUND}
    return ProductOut(**product).model_dump(by_alias=True)


@product_router.put("/product/{product_id}", response_model=UpdateOutcome)
async def put_product(
    product_id: str,
    data: ProductUpdate,
    user: Identity = Depends(get_current_user),
    db=Depends(get_db),
):
    return await update_product(db, product_id, data.to_patch(), user)


@product_router.delete("/product/{product_id}", response_model=DeleteOutcome)
async def remove_product(product_id: str, user: Identity = Depends(get_current_user), db=Depends(get_db)):
    return await delete_product(db, product_id, user)


@product_router.get("/search/{key}", response_model=List[ProductOut])
async def search(key: str, user: Identity = Depends(get_current_user), db=Depends(get_db)):
    return await search_products(db, key, user)
