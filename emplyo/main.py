import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from emplyo.core import config
from emplyo.core.cors import PathExemptCORSMiddleware
from emplyo.core.logging_config import sanitize_log_data, setup_logging
from emplyo.llm.errors import LLMError

# ✅ Import All API Routes
from emplyo.api.routes import (
    ai_interview,
    attendance,
    auth,
    courses,
    dashboard,
    employees,
    interviews,
    system,
)

logger = logging.getLogger(__name__)


def _startup_settings() -> dict:
    return {
        "database_url": config.DATABASE_URL,
        "llm_gateway_base_url": config.LLM_GATEWAY_BASE_URL,
        "llm_model": config.LLM_MODEL,
        "cors_origins": config.CORS_ORIGINS,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    if config.RUN_MIGRATIONS:
        from emplyo.db.migrate import run_migrations
        run_migrations()
    elif config.AUTO_CREATE_TABLES:
        from emplyo.db.init_db import init_db
        init_db()
    if not config.LLM_GATEWAY_API_KEY:
        logger.warning("LLM_GATEWAY_API_KEY is not configured; AI interview requests will fail")
    logger.info(f"Emplyo API started: {sanitize_log_data(_startup_settings())}")
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Emplyo API", lifespan=lifespan)

# Function endpoints answer CORS themselves, for any origin
FUNCTIONS_PREFIX = ai_interview.router.prefix + "/"

app.add_middleware(
    PathExemptCORSMiddleware,
    exempt_prefixes=(FUNCTIONS_PREFIX,),
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "x-client-info", "apikey"],
)


@app.exception_handler(LLMError)
async def llm_error_handler(request: Request, exc: LLMError):
    logger.error(f"AI request failed on {request.url.path}: {exc.message}")
    headers = ai_interview.CORS_HEADERS if request.url.path.startswith(FUNCTIONS_PREFIX) else None
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=headers)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(auth.router)
app.include_router(employees.router)
app.include_router(attendance.router)
app.include_router(courses.router)
app.include_router(dashboard.router)
app.include_router(interviews.router)
app.include_router(ai_interview.router)
app.include_router(system.router)


# ============================================
# ✅ HEALTH CHECK ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Emplyo API running"}
