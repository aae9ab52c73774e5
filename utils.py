from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    """Convert a MongoDB document into a JSON serializable dict."""
    if doc is None:
        return None
    doc = dict(doc)
    if "_id" in doc:
        doc["_id"] = str(doc["_id"])
    return doc


def serialize_docs(docs):
    return [serialize_doc(d) for d in docs]


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Return the ObjectId for a path parameter, or None when it is malformed."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None
