"""
Admin API endpoints.

Every route requires a bearer token whose role claim is "admin".
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from auth import Identity, require_admin
from catalog import BlogStore, ProductStore
from deps import get_accounts, get_blog, get_orders, get_products
from errors import NotFound
from models import (
    BlogPostUpdate, MessageResponse, Order, OrderStatusUpdate, ProductUpdate,
    PublicUser, ReconcileResponse,
)
from orders import OrderService
from users import AccountService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[PublicUser])
async def list_users(accounts: AccountService = Depends(get_accounts)):
    return await accounts.list_users()


@router.get("/orders", response_model=List[Order])
async def list_orders(orders: OrderService = Depends(get_orders)):
    return await orders.list_all_orders()


@router.put("/orders/{order_id}", response_model=Order)
async def update_any_order(
    order_id: str,
    update: OrderStatusUpdate,
    admin: Identity = Depends(require_admin),
    orders: OrderService = Depends(get_orders),
):
    return await orders.update_status(admin, order_id, update, scoped=False)


@router.post("/reconcile/order-counts", response_model=ReconcileResponse)
async def reconcile_order_counts(orders: OrderService = Depends(get_orders)):
    return ReconcileResponse(updated=await orders.reconcile_order_counts())


# ---------------- PRODUCTS ----------------
@router.put("/products/{product_id}")
async def update_product(
    product_id: str,
    patch: ProductUpdate,
    products: ProductStore = Depends(get_products),
):
    product = await products.update(product_id, patch.model_dump(by_alias=True, exclude_unset=True))
    if not product:
        raise NotFound("Product not found")
    return product


@router.delete("/products/{product_id}", response_model=MessageResponse)
async def delete_product(product_id: str, products: ProductStore = Depends(get_products)):
    if not await products.delete(product_id):
        raise NotFound("Product not found")
    logger.info("Product %s deleted", product_id)
    return MessageResponse(message="Product deleted successfully")


# ---------------- BLOG ----------------
@router.put("/blog/{post_id}")
async def update_blog_post(
    post_id: str,
    patch: BlogPostUpdate,
    blog: BlogStore = Depends(get_blog),
):
    post = await blog.update(post_id, patch.model_dump(by_alias=True, exclude_unset=True))
    if not post:
        raise NotFound("Blog post not found")
    return post


@router.delete("/blog/{post_id}", response_model=MessageResponse)
async def delete_blog_post(post_id: str, blog: BlogStore = Depends(get_blog)):
    if not await blog.delete(post_id):
        raise NotFound("Blog post not found")
    logger.info("Blog post %s deleted", post_id)
    return MessageResponse(message="Blog post deleted successfully")
