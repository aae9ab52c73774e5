import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from auth import ADMIN_ROLE, USER_ROLE, PasswordHasher, TokenService
from db import Store
from errors import Conflict, InvalidCredentials, NotFound
from models import ProfileUpdate, PublicUser, RegisterRequest
from utils import parse_object_id

logger = logging.getLogger(__name__)


class UserStore(Store):
    collection_name = "users"

    async def find_by_email(self, email: str) -> Optional[dict]:
        return await self._run(self.collection.find_one({"email": email}))

    async def get(self, user_id: str) -> Optional[dict]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await self._run(self.collection.find_one({"_id": oid}))

    async def insert(self, doc: dict) -> dict:
        result = await self._run(self.collection.insert_one(doc))
        doc["_id"] = result.inserted_id
        return doc

    async def update_fields(self, user_id: str, fields: dict) -> Optional[dict]:
        oid = parse_object_id(user_id)
        if oid is None:
            return None
        return await self._run(
            self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        )

    async def increment_orders(self, user_id: str, amount: int = 1) -> None:
        oid = parse_object_id(user_id)
        if oid is None:
            return
        await self._run(self.collection.update_one({"_id": oid}, {"$inc": {"orders": amount}}))

    async def set_order_count(self, user_id, count: int) -> None:
        await self._run(self.collection.update_one({"_id": user_id}, {"$set": {"orders": count}}))

    async def list_all(self) -> List[dict]:
        return await self._find_all(sort=[("createdAt", -1)])


class AccountService:
    """Registration, login and self-service profile management."""

    def __init__(
        self,
        users: UserStore,
        tokens: TokenService,
        passwords: PasswordHasher,
        admin_emails=(),
    ):
        self.users = users
        self.tokens = tokens
        self.passwords = passwords
        self.admin_emails = {e.lower() for e in admin_emails}

    def _issue(self, doc: dict) -> str:
        return self.tokens.issue(str(doc["_id"]), doc["email"], doc.get("role", USER_ROLE))

    async def register(self, req: RegisterRequest) -> Tuple[PublicUser, str]:
        email = req.email.lower()
        if await self.users.find_by_email(email):
            raise Conflict()

        doc = req.model_dump(by_alias=True, exclude={"password"})
        doc.update(
            {
                "email": email,
                "password": await run_in_threadpool(self.passwords.hash, req.password),
                "orders": 0,
                "profileImage": None,
                "role": ADMIN_ROLE if email in self.admin_emails else USER_ROLE,
                "createdAt": datetime.now(timezone.utc),
            }
        )
        try:
            doc = await self.users.insert(doc)
        except DuplicateKeyError:
            raise Conflict()

        logger.info("Registered user %s", doc["_id"])
        return PublicUser.from_doc(doc), self._issue(doc)

    async def login(self, email: str, password: str) -> Tuple[PublicUser, str]:
        doc = await self.users.find_by_email(email.strip().lower())
        hashed = doc.get("password") if doc else None
        if not await run_in_threadpool(self.passwords.verify, password, hashed):
            logger.warning("Failed login for %s", email)
            raise InvalidCredentials()
        return PublicUser.from_doc(doc), self._issue(doc)

    async def get_profile(self, user_id: str) -> PublicUser:
        doc = await self.users.get(user_id)
        if not doc:
            raise NotFound("User not found")
        return PublicUser.from_doc(doc)

    async def update_profile(self, user_id: str, patch: ProfileUpdate) -> PublicUser:
        fields = patch.model_dump(by_alias=True, exclude_unset=True)
        if not fields:
            return await self.get_profile(user_id)
        doc = await self.users.update_fields(user_id, fields)
        if not doc:
            raise NotFound("User not found")
        return PublicUser.from_doc(doc)

    async def change_password(self, user_id: str, current: str, new: str) -> None:
        doc = await self.users.get(user_id)
        if not doc:
            raise NotFound("User not found")
        if not await run_in_threadpool(self.passwords.verify, current, doc.get("password")):
            raise InvalidCredentials("Current password is incorrect")
        # Tokens issued before the change stay valid until they expire
        hashed = await run_in_threadpool(self.passwords.hash, new)
        await self.users.update_fields(user_id, {"password": hashed})
        logger.info("Password changed for user %s", user_id)

    async def list_users(self) -> List[PublicUser]:
        return [PublicUser.from_doc(doc) for doc in await self.users.list_all()]
