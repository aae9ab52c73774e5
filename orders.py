"""
Order store and lifecycle.

Creating an order is two sequential writes: the order insert, then the
owner's order counter increment. A crash between them leaves the counter one
short; reconcile_order_counts() recomputes every counter from the stored
orders and can be run at any time.
"""

import logging
import uuid
from collections import Counter
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pymongo import ReturnDocument

from auth import Identity
from db import Store
from errors import NotFound
from models import OrderCreate, OrderStatusUpdate, Order
from users import UserStore
from utils import parse_object_id

logger = logging.getLogger(__name__)

CANCELLED = "Cancelled"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStore(Store):
    collection_name = "orders"

    async def insert(self, doc: dict) -> dict:
        result = await self._run(self.collection.insert_one(doc))
        doc["_id"] = result.inserted_id
        return doc

    async def update(self, query: dict, update: dict) -> Optional[dict]:
        return await self._run(
            self.collection.find_one_and_update(
                query, update, return_document=ReturnDocument.AFTER
            )
        )

    async def list_for_user(self, user_id: str) -> List[dict]:
        return await self._find_all({"userId": user_id}, sort=[("date", -1)])

    async def list_all(self) -> List[dict]:
        return await self._find_all(sort=[("date", -1)])

    async def count_by_user(self) -> Counter:
        cursor = self.collection.find({}, {"userId": 1})
        rows = await self._run(cursor.to_list(length=None))
        return Counter(row.get("userId") for row in rows)


class OrderService:
    def __init__(
        self,
        orders: OrderStore,
        users: UserStore,
        clear_cancellation_on_reopen: bool = False,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.orders = orders
        self.users = users
        self.clear_cancellation_on_reopen = clear_cancellation_on_reopen
        self.clock = clock

    async def create_order(self, identity: Identity, payload: OrderCreate) -> Order:
        now = self.clock()
        doc = payload.model_dump(by_alias=True)
        doc.update(
            {
                "userId": identity.user_id,
                "id": payload.id or f"ORD-{uuid.uuid4().hex[:8].upper()}",
                "date": payload.date or now.isoformat(),
                "createdAt": now,
            }
        )
        doc = await self.orders.insert(doc)
        await self.users.increment_orders(identity.user_id)
        logger.info("Order %s created for user %s", doc["id"], identity.user_id)
        return Order.from_doc(doc)

    async def list_orders(self, identity: Identity) -> List[Order]:
        docs = await self.orders.list_for_user(identity.user_id)
        return [Order.from_doc(d) for d in docs]

    async def list_all_orders(self) -> List[Order]:
        return [Order.from_doc(d) for d in await self.orders.list_all()]

    def _status_update(self, update: OrderStatusUpdate) -> dict:
        fields = {"status": update.status}
        if update.tracking is not None:
            fields["tracking"] = update.tracking

        change = {"$set": fields}
        if update.status == CANCELLED:
            if update.cancellation_reason is not None:
                fields["cancellationReason"] = {
                    "reason": update.cancellation_reason.reason,
                    "comment": update.cancellation_reason.comment,
                    "cancelledAt": self.clock(),
                }
        elif self.clear_cancellation_on_reopen:
            change["$unset"] = {"cancellationReason": ""}
        return change

    async def update_status(
        self,
        identity: Identity,
        order_id: str,
        update: OrderStatusUpdate,
        scoped: bool = True,
    ) -> Order:
        """
        Apply a status change to one order.

        With scoped=True only the caller's own order matches; the unscoped
        form is for administrators and must be gated by the caller.
        """
        oid = parse_object_id(order_id)
        if oid is None:
            raise NotFound("Order not found")
        query = {"_id": oid}
        if scoped:
            query["userId"] = identity.user_id

        doc = await self.orders.update(query, self._status_update(update))
        if not doc:
            raise NotFound("Order not found")

        if update.status == CANCELLED and update.cancellation_reason is not None:
            logger.info(
                "Order %s cancelled by %s: %s",
                order_id, identity.user_id, update.cancellation_reason.reason,
            )
        else:
            logger.info("Order %s moved to %s by %s", order_id, update.status, identity.user_id)
        return Order.from_doc(doc)

    async def reconcile_order_counts(self) -> int:
        """Reset every user's order counter to the number of stored orders."""
        counts = await self.orders.count_by_user()
        changed = 0
        for user in await self.users.list_all():
            expected = counts.get(str(user["_id"]), 0)
            if user.get("orders", 0) != expected:
                await self.users.set_order_count(user["_id"], expected)
                changed += 1
        logger.info("Reconciled order counts, %d user(s) corrected", changed)
        return changed
