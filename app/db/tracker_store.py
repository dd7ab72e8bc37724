# app/db/tracker_store.py
from datetime import datetime
from typing import Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from .mongo import quit_time_collection, daily_counts_collection

QUIT_DOC_ID = "quit"


class TrackerStore:
    """
    Key-value view over the two tracker collections.

    - quit time: one scalar document
    - daily counts: one document per logical date, written atomically
    """

    def __init__(self, quit_collection, daily_collection):
        self.quit_collection = quit_collection
        self.daily_collection = daily_collection

    async def get_quit_time(self) -> Optional[datetime]:
        doc = await self.quit_collection.find_one({"_id": QUIT_DOC_ID})
        if not doc:
            return None
        return doc.get("quit_date_time")

    async def set_quit_time(self, quit_date_time: datetime, now: datetime) -> None:
        # Replaces any previous quit time
        await self.quit_collection.update_one(
            {"_id": QUIT_DOC_ID},
            {
                "$set": {"quit_date_time": quit_date_time, "updated_at": now},
                "$setOnInsert": {"created_at": now},
            },
            upsert=True,
        )

    async def get_daily_count(self, date: str) -> int:
        doc = await self.daily_collection.find_one({"date": date})
        if not doc:
            return 0
        return int(doc.get("count", 0))

    async def set_daily_count(self, date: str, count: int, now: datetime) -> int:
        update = {
            "$set": {"count": int(count), "updated_at": now},
            "$setOnInsert": {"created_at": now},
        }
        try:
            await self.daily_collection.update_one({"date": date}, update, upsert=True)
        except DuplicateKeyError:
            # Lost the insert race for a new date; the doc exists now
            await self.daily_collection.update_one({"date": date}, update, upsert=True)
        return int(count)

    async def increment_daily_count(self, date: str, delta: int, now: datetime) -> int:
        """Atomically add `delta` to the day's count; never goes below 0."""
        if delta >= 0:
            update = {
                "$inc": {"count": delta},
                "$set": {"updated_at": now},
                "$setOnInsert": {"created_at": now},
            }
            try:
                doc = await self._upsert_and_fetch(date, update)
            except DuplicateKeyError:
                # Lost the insert race for a new date; the doc exists now
                doc = await self._upsert_and_fetch(date, update)
            return int(doc.get("count", 0))

        # Decrement only when enough is left to take away
        doc = await self.daily_collection.find_one_and_update(
            {"date": date, "count": {"$gte": -delta}},
            {"$inc": {"count": delta}, "$set": {"updated_at": now}},
            return_document=ReturnDocument.AFTER,
        )
        if doc is None:
            return await self.get_daily_count(date)
        return int(doc.get("count", 0))

    async def _upsert_and_fetch(self, date: str, update: dict):
        return await self.daily_collection.find_one_and_update(
            {"date": date},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )


def get_store() -> TrackerStore:
    return TrackerStore(quit_time_collection, daily_counts_collection)
