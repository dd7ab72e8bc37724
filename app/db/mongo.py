# app/db/mongo.py
from motor.motor_asyncio import AsyncIOMotorClient
from dotenv import load_dotenv
import os

load_dotenv()

MONGO_URL = os.getenv("MONGODB_URL")
if not MONGO_URL:
    raise RuntimeError("MONGODB_URL env var is not set")

MONGO_DB = os.getenv("MONGODB_DB", "quit_tracker")

client = AsyncIOMotorClient(MONGO_URL)
db = client[MONGO_DB]

# Collections
quit_time_collection = db["quit_time"]        # single doc { _id: "quit", quit_date_time }
daily_counts_collection = db["daily_counts"]  # one doc per day { date: "YYYY-MM-DD", count }


# Call this once at startup to ensure indexes exist.
async def init_db_indexes() -> None:
    # Daily counts: one document per logical date
    await daily_counts_collection.create_index("date", unique=True)
