import logging
from typing import List, Optional

from pymongo import ReturnDocument

from db import Store
from utils import parse_object_id, serialize_doc, serialize_docs

logger = logging.getLogger(__name__)


class DocumentStore(Store):
    """Plain CRUD over one collection; documents are returned JSON-ready."""

    default_sort = None

    async def list(self, query=None) -> List[dict]:
        return serialize_docs(await self._find_all(query, sort=self.default_sort))

    async def get(self, doc_id: str) -> Optional[dict]:
        oid = parse_object_id(doc_id)
        if oid is None:
            return None
        return serialize_doc(await self._run(self.collection.find_one({"_id": oid})))

    async def create(self, doc: dict) -> dict:
        result = await self._run(self.collection.insert_one(doc))
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    async def update(self, doc_id: str, fields: dict) -> Optional[dict]:
        oid = parse_object_id(doc_id)
        if oid is None:
            return None
        if not fields:
            return await self.get(doc_id)
        doc = await self._run(
            self.collection.find_one_and_update(
                {"_id": oid}, {"$set": fields}, return_document=ReturnDocument.AFTER
            )
        )
        return serialize_doc(doc)

    async def delete(self, doc_id: str) -> bool:
        oid = parse_object_id(doc_id)
        if oid is None:
            return False
        result = await self._run(self.collection.delete_one({"_id": oid}))
        return result.deleted_count == 1

    async def replace_all(self, docs: List[dict]) -> int:
        await self._run(self.collection.delete_many({}))
        # insert_many adds _id to the documents it is given
        await self._run(self.collection.insert_many([dict(d) for d in docs]))
        logger.info("Replaced %s with %d document(s)", self.collection_name, len(docs))
        return len(docs)


class ProductStore(DocumentStore):
    collection_name = "products"

    async def list_express(self) -> List[dict]:
        return await self.list({"$or": [{"category": "7m"}, {"deliveryTime": "7m"}]})


class BlogStore(DocumentStore):
    collection_name = "blogposts"
    default_sort = [("date", -1)]

    async def list_by_category(self, category: str) -> List[dict]:
        return await self.list({"category": category})
