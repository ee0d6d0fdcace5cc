# app/database.py
import logging
from app.config import Settings, get_settings
from app.repositories import EmployeeRepository, InMemoryEmployeeRepository, MongoEmployeeRepository

logger = logging.getLogger(__name__)

class Database:
    repository: EmployeeRepository = None

db = Database()

def build_repository(settings: Settings) -> EmployeeRepository:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        return InMemoryEmployeeRepository()
    if backend == "mongo":
        return MongoEmployeeRepository(settings.MONGODB_URI, settings.MONGODB_DB_NAME)
    raise ValueError(f"Unknown STORAGE_BACKEND '{settings.STORAGE_BACKEND}', expected 'memory' or 'mongo'")

async def connect_repository():
    settings = get_settings()
    db.repository = build_repository(settings)
    await db.repository.connect()
    logger.info("Employee repository ready (%s)", settings.STORAGE_BACKEND)

async def close_repository():
    if db.repository:
        await db.repository.close()
        db.repository = None
        logger.info("Employee repository closed")

async def get_employee_repository() -> EmployeeRepository:
    if db.repository is None:
        await connect_repository()
    return db.repository
