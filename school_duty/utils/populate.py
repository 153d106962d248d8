from motor.motor_asyncio import AsyncIOMotorCollection


def _ref_ids(value):
    if isinstance(value, list):
        return value
    return [] if value is None else [value]


async def populate(collection: AsyncIOMotorCollection, docs: list[dict], field: str, fields: tuple[str, ...] | None = None):
    """
    Replaces the reference(s) stored in doc[field] with the referenced documents.

    One query with $in over all referenced ids. A single reference that points
    nowhere becomes None; missing entries of a reference list are dropped.
    `fields` limits the projection (``_id`` is always included).
    """
    ids = {ref for doc in docs for ref in _ref_ids(doc.get(field))}
    if not ids:
        return docs

    projection = {name: 1 for name in fields} if fields else None
    cursor = collection.find({"_id": {"$in": list(ids)}}, projection)
    refs = {ref["_id"]: ref for ref in await cursor.to_list(length=None)}

    for doc in docs:
        value = doc.get(field)
        if isinstance(value, list):
            doc[field] = [refs[ref] for ref in value if ref in refs]
        elif value is not None:
            doc[field] = refs.get(value)
    return docs
