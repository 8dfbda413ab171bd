import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from src.config import settings
from src.health import router as health_router
from src.bills.routes import router as bills_router
from src.store.service import close_store_service
from src.error_handler import exception_handler

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Set log level for application modules to INFO
logging.getLogger('src').setLevel(logging.INFO)

# Keep external libraries at WARNING to reduce noise
logging.getLogger('uvicorn').setLevel(logging.WARNING)
logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
logging.getLogger('httpx').setLevel(logging.WARNING)

@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Shutdown: close the store HTTP client
    await close_store_service()

app = FastAPI(
    title="Billed Employee API",
    version="1.0.0",
    docs_url="/docs" if settings.ENV == "development" else None,
    lifespan=lifespan
)

# CORS Configuration
if settings.ENV == "development":
    origins = ["http://localhost:8080", "http://127.0.0.1:8080"]
else:
    origins = [settings.WEB_APP_URL]  # Production domain

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

exception_handler(app)

app.include_router(health_router, tags=["health"])
app.include_router(bills_router, prefix="/api/bills", tags=["bills"])
