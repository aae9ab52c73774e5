from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from utils import serialize_doc


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire and in MongoDB."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------- USERS ----------------
class ProfileFields(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None


class RegisterRequest(ProfileFields):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class ProfileUpdate(ProfileFields):
    profile_image: Optional[str] = None


class LoginRequest(CamelModel):
    email: str
    password: str


class PasswordChange(CamelModel):
    current_password: str
    new_password: str = Field(..., min_length=6, max_length=72)


class PublicUser(ProfileFields):
    id: str
    name: str = ""
    email: str
    orders: int = 0
    profile_image: Optional[str] = None
    role: str = "user"
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict) -> "PublicUser":
        doc = serialize_doc(doc)
        doc.pop("password", None)
        name = " ".join(p for p in (doc.get("firstName"), doc.get("lastName")) if p)
        return cls.model_validate({**doc, "id": doc["_id"], "name": name})


class AuthResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class MessageResponse(BaseModel):
    message: str


# ---------------- ORDERS ----------------
class CancellationReason(CamelModel):
    reason: str = Field(..., min_length=1)
    comment: Optional[str] = None


class CancellationRecord(CancellationReason):
    cancelled_at: datetime


class OrderCreate(CamelModel):
    id: Optional[str] = None
    date: Optional[str] = None
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: float = Field(0, ge=0)
    status: str = Field("Pending", min_length=1)
    tracking: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    address: Optional[str] = None


class OrderStatusUpdate(CamelModel):
    status: str = Field(..., min_length=1)
    tracking: Optional[Dict[str, Any]] = None
    cancellation_reason: Optional[CancellationReason] = None


class Order(CamelModel):
    object_id: str = Field(..., alias="_id")
    user_id: str
    id: Optional[str] = None
    date: Optional[str] = None
    items: List[Dict[str, Any]] = Field(default_factory=list)
    total: float = 0
    status: str
    tracking: Optional[Dict[str, Any]] = None
    payment_method: Optional[str] = None
    address: Optional[str] = None
    cancellation_reason: Optional[CancellationRecord] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_doc(cls, doc: dict) -> "Order":
        return cls.model_validate(serialize_doc(doc))


class ReconcileResponse(BaseModel):
    updated: int


# ---------------- CATALOG ----------------
class ProductIn(CamelModel):
    name: str = Field(..., min_length=1)
    price: float = Field(0, ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    img: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviews: Optional[int] = Field(None, ge=0)
    delivery_time: Optional[str] = None


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    category: Optional[str] = None
    img: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviews: Optional[int] = Field(None, ge=0)
    delivery_time: Optional[str] = None


class BlogPostIn(CamelModel):
    title: str = Field(..., min_length=1)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None


class BlogPostUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None


class SeedResponse(BaseModel):
    message: str
    count: int


class HealthResponse(BaseModel):
    status: str
    message: str
    database: str
