import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from school_duty.config import MONGO_DB, MONGO_URL

logger = logging.getLogger(__name__)


class Database:
    """Owns the MongoDB client; the app lifespan calls connect/disconnect."""

    def __init__(self, url: str = MONGO_URL, name: str = MONGO_DB):
        self.url = url
        self.name = name
        self.client: AsyncIOMotorClient | None = None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        if self.client is None:
            raise RuntimeError("Database is not connected")
        return self.client[self.name]

    async def connect(self):
        self.client = AsyncIOMotorClient(self.url)
        logger.info("🔌 Connected to MongoDB database '%s'", self.name)

    async def ensure_indexes(self):
        db = self.db
        await db.users.create_index("schoolId", unique=True)
        await db.attendances.create_index([("schoolId", 1), ("date", -1)])
        await db.attendances.create_index([("attendanceType", 1), ("date", -1)])
        await db.duties.create_index([("group", 1), ("date", 1)])

    def disconnect(self):
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("🔌 Disconnected from MongoDB")


database = Database()


def get_db() -> AsyncIOMotorDatabase:
    return database.db
