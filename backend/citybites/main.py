import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from citybites.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(os.environ.get("LOG_DIR", Path(__file__).resolve().parent.parent / "logs"))
_LOG_DIR.mkdir(parents=True, exist_ok=True)

_log_level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "citybites.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from citybites.dependencies import build_food_guide
from citybites.exception_handlers import setup_exception_handlers
from citybites.routers import food

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    food_guide = build_food_guide(settings)
    app.state.food_guide = food_guide

    if not settings.tavily_api_key:
        logger.warning("TAVILY_API_KEY not set; food tools will return configuration errors")
    if not settings.llm_configured:
        logger.warning("No LLM API key set; food tools will return configuration errors")
    if not settings.images_enabled:
        logger.info("UNSPLASH_ACCESS_KEY not set; dish photos disabled")

    yield

    await food_guide.close()
    logger.info("Food guide clients closed")


app = FastAPI(
    title="CityBites",
    description="AI travel companion that helps you explore cities through food",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(food.router, prefix="/api/food", tags=["food"])


@app.get("/api/health")
async def health_check():
    return {
        "status": "ok",
        "service": "citybites",
        "search_configured": bool(settings.tavily_api_key),
        "llm_configured": settings.llm_configured,
        "images_enabled": settings.images_enabled,
    }
