import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_tailor.config import settings
from resume_tailor.api import (
    tailor_routes,
    wizard_routes,
    history_routes,
    download_routes,
    llm_routes,
)
from resume_tailor.services.history_service import ResumeHistoryStore
from resume_tailor.services.response_cache import ResponseCache
from resume_tailor.services.state_store import JsonFileStore
from resume_tailor.services.wizard_service import WizardRegistry

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Tailor a resume to a job description with OpenAI or DeepSeek",
)

# ── Session-scoped state ────────────────────────────────────────────────────

# One response cache for the process; every wizard session shares it
app.state.response_cache = ResponseCache()
app.state.wizards = WizardRegistry(app.state.response_cache)
app.state.state_store = JsonFileStore(settings.state_dir)
app.state.history = ResumeHistoryStore(settings.history_path)

# ── CORS ────────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routers ─────────────────────────────────────────────────────────────────

app.include_router(tailor_routes.router, prefix="/api/tailor", tags=["Tailoring"])
app.include_router(wizard_routes.router, prefix="/api/wizard", tags=["Wizard"])
app.include_router(history_routes.router, prefix="/api/history", tags=["History"])
app.include_router(download_routes.router, prefix="/api/download", tags=["Download"])
app.include_router(llm_routes.router, prefix="/api/llm", tags=["LLM"])

# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
