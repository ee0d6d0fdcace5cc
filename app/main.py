# app/main.py
from fastapi import FastAPI
from contextlib import asynccontextmanager
from app import log
from app.routes import employee_router
from app.database import connect_repository, close_repository
from app.errors import register_exception_handlers
from app.config import get_settings

settings = get_settings()

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    log.setup(settings.LOG_LEVEL)
    await connect_repository()
    yield
    # Shutdown
    await close_repository()

app = FastAPI(title="Employee Service", lifespan=lifespan)

register_exception_handlers(app)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Service"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
