"""RetailIQ FastAPI application — business questions answered from the retail store."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from retailiq.config import settings
from retailiq.adapters.llm_client import LLMClient
from retailiq.storage.db import connect
from retailiq.api.routes_health import router as health_router
from retailiq.api.routes_analyze import router as analyze_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store and the LLM client once for the whole process."""
    print("[main] RetailIQ starting up...")
    print(f"[main] Mode: {settings.app_env}")
    app.state.db = connect(settings.database_path)
    app.state.llm = LLMClient.from_settings(settings)
    if not app.state.llm.is_available():
        print("[main] WARNING: OPENAI_API_KEY not set, /api/analyze will fail")
    print("[main] Ready.")
    yield
    print("[main] Shutting down.")
    app.state.llm.close()
    app.state.db.close()


app = FastAPI(
    title="RetailIQ",
    description="Ask business questions about a retail database and get SQL, data and AI insights",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS — allow the browser frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

# Register routers
app.include_router(health_router)
app.include_router(analyze_router)


def run() -> None:
    import uvicorn
    print(f"[main] Server running on port {settings.port}")
    print(f"[main] Test endpoint: http://localhost:{settings.port}/api/health")
    uvicorn.run(
        "retailiq.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
