import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

import db
import seed_data
from admin import router as admin_router
from auth import Identity, PasswordHasher, TokenService, get_current_user, require_admin
from catalog import BlogStore, ProductStore
from config import Settings, configure_logging, get_settings
from deps import get_accounts, get_blog, get_orders, get_products, require_seed_enabled
from errors import NotFound, PayloadTooLarge, error_body, install_handlers
from models import (
    AuthResponse, BlogPostIn, HealthResponse, LoginRequest, MessageResponse, Order,
    OrderCreate, OrderStatusUpdate, PasswordChange, ProductIn, ProfileUpdate,
    PublicUser, RegisterRequest, SeedResponse,
)
from orders import OrderService, OrderStore
from users import AccountService, UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


# ---------------- USERS ----------------
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(req: RegisterRequest, accounts: AccountService = Depends(get_accounts)):
    user, token = await accounts.register(req)
    return AuthResponse(message="User created successfully", token=token, user=user)


@router.post("/login", response_model=AuthResponse)
async def login_user(login: LoginRequest, accounts: AccountService = Depends(get_accounts)):
    user, token = await accounts.login(login.email, login.password)
    return AuthResponse(message="Login successful", token=token, user=user)


@router.get("/user", response_model=PublicUser)
async def get_user(
    identity: Identity = Depends(get_current_user),
    accounts: AccountService = Depends(get_accounts),
):
    return await accounts.get_profile(identity.user_id)


@router.put("/user", response_model=PublicUser)
async def update_user(
    patch: ProfileUpdate,
    identity: Identity = Depends(get_current_user),
    accounts: AccountService = Depends(get_accounts),
):
    return await accounts.update_profile(identity.user_id, patch)


@router.put("/user/password", response_model=MessageResponse)
async def change_password(
    req: PasswordChange,
    identity: Identity = Depends(get_current_user),
    accounts: AccountService = Depends(get_accounts),
):
    await accounts.change_password(identity.user_id, req.current_password, req.new_password)
    return MessageResponse(message="Password updated successfully")


# ---------------- PRODUCTS ----------------
@router.get("/products")
async def get_all_products(products: ProductStore = Depends(get_products)):
    return await products.list()


@router.get("/products/7m")
async def get_express_products(products: ProductStore = Depends(get_products)):
    return await products.list_express()


@router.post("/products", status_code=status.HTTP_201_CREATED)
async def create_product(product: ProductIn, products: ProductStore = Depends(get_products)):
    return await products.create(product.model_dump(by_alias=True, exclude_none=True))


# ---------------- ORDERS ----------------
@router.get("/orders", response_model=List[Order])
async def get_user_orders(
    identity: Identity = Depends(get_current_user),
    orders: OrderService = Depends(get_orders),
):
    return await orders.list_orders(identity)


@router.post("/orders", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: OrderCreate,
    identity: Identity = Depends(get_current_user),
    orders: OrderService = Depends(get_orders),
):
    return await orders.create_order(identity, payload)


@router.put("/orders/{order_id}", response_model=Order)
async def update_order(
    order_id: str,
    update: OrderStatusUpdate,
    identity: Identity = Depends(get_current_user),
    orders: OrderService = Depends(get_orders),
):
    return await orders.update_status(identity, order_id, update)


# ---------------- BLOG ----------------
@router.get("/blog")
async def get_blog_posts(blog: BlogStore = Depends(get_blog)):
    return await blog.list()


@router.get("/blog/category/{category}")
async def get_blog_posts_by_category(category: str, blog: BlogStore = Depends(get_blog)):
    return await blog.list_by_category(category)


@router.get("/blog/{post_id}")
async def get_blog_post(post_id: str, blog: BlogStore = Depends(get_blog)):
    post = await blog.get(post_id)
    if not post:
        raise NotFound("Blog post not found")
    return post


@router.post("/blog", status_code=status.HTTP_201_CREATED)
async def create_blog_post(post: BlogPostIn, blog: BlogStore = Depends(get_blog)):
    return await blog.create(post.model_dump(by_alias=True, exclude_none=True))


@router.delete(
    "/blog/{post_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_blog_post(post_id: str, blog: BlogStore = Depends(get_blog)):
    if not await blog.delete(post_id):
        raise NotFound("Blog post not found")
    return MessageResponse(message="Blog post deleted successfully")


# ---------------- SEED ----------------
@router.post(
    "/seed/products",
    response_model=SeedResponse,
    dependencies=[Depends(require_seed_enabled)],
)
async def seed_products(products: ProductStore = Depends(get_products)):
    count = await products.replace_all(seed_data.PRODUCTS)
    return SeedResponse(message="Products seeded successfully", count=count)


@router.post(
    "/seed/blog",
    response_model=SeedResponse,
    dependencies=[Depends(require_seed_enabled)],
)
async def seed_blog(blog: BlogStore = Depends(get_blog)):
    count = await blog.replace_all(seed_data.BLOG_POSTS)
    return SeedResponse(message="Blog posts seeded successfully", count=count)


# ---------------- HEALTH ----------------
@router.get("/health", response_model=HealthResponse)
async def health(request: Request):
    connected = await db.ping(request.app.state.client)
    return HealthResponse(
        status="OK",
        message="Server is running",
        database="Connected" if connected else "Disconnected",
    )


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body exceeds the configured limit."""

    def __init__(self, app, max_bytes: int):
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(self, request: Request, call_next):
        length = request.headers.get("content-length")
        if length and length.isdigit() and int(length) > self.max_bytes:
            return JSONResponse(
                status_code=PayloadTooLarge.status_code,
                content=error_body(PayloadTooLarge.message, PayloadTooLarge.code),
            )
        return await call_next(request)


def create_app(settings: Optional[Settings] = None, client=None) -> FastAPI:
    """
    Build the application.

    Run with `uvicorn main:create_app --factory`. A client passed in is owned
    by the caller and is not closed on shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    owns_client = client is None
    client = client or db.create_client(settings)
    database = client[settings.db_name]

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            await db.ensure_indexes(database)
            logger.info("Indexes ensured on %s", settings.db_name)
        except Exception as e:
            logger.warning("Failed to create indexes: %s", e)
        yield
        if owns_client:
            client.close()
        logger.info("Shut down")

    app = FastAPI(title="Shop API", lifespan=lifespan)

    timeout = settings.store_timeout_seconds
    users = UserStore(database, timeout)
    tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )
    app.state.settings = settings
    app.state.client = client
    app.state.tokens = tokens
    app.state.accounts = AccountService(
        users, tokens, PasswordHasher(settings.bcrypt_rounds), settings.admin_emails
    )
    app.state.orders = OrderService(
        OrderStore(database, timeout),
        users,
        clear_cancellation_on_reopen=settings.clear_cancellation_on_reopen,
    )
    app.state.products = ProductStore(database, timeout)
    app.state.blog = BlogStore(database, timeout)

    app.add_middleware(BodySizeLimitMiddleware, max_bytes=settings.max_body_bytes)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_handlers(app)
    app.include_router(router)
    app.include_router(admin_router)
    return app


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.port)
