from fastapi import Depends, Request

from catalog import BlogStore, ProductStore
from config import Settings
from errors import NotFound
from orders import OrderService
from users import AccountService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_accounts(request: Request) -> AccountService:
    return request.app.state.accounts


def get_orders(request: Request) -> OrderService:
    return request.app.state.orders


def get_products(request: Request) -> ProductStore:
    return request.app.state.products


def get_blog(request: Request) -> BlogStore:
    return request.app.state.blog


def require_seed_enabled(settings: Settings = Depends(get_app_settings)) -> None:
    if not settings.seed_routes_enabled:
        raise NotFound()
