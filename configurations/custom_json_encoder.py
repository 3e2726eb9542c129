import json
from datetime import datetime, date
from bson import ObjectId


class CustomJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, ObjectId):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        return super().default(obj)


def serialize_doc(doc):
    """Turn a Mongo document into a plain JSON-ready dict.

    The top level ``_id`` is exposed as ``id``; nested ObjectIds become strings.
    """
    if not doc:
        return doc
    out = json.loads(json.dumps(doc, cls=CustomJSONEncoder))
    if "_id" in out:
        out["id"] = out.pop("_id")
    return out


def serialize_docs(docs):
    return [serialize_doc(doc) for doc in docs]
