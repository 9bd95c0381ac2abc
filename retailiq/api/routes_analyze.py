"""Business question analysis endpoint."""

import sqlite3
import traceback

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from retailiq.adapters.llm_client import LLMClient
from retailiq.agents.analyst_agent import analyze
from retailiq.api.deps import get_db, get_llm_client, get_settings
from retailiq.config import Settings
from retailiq.errors import InvalidQuestionError
from retailiq.models.schemas import AnalyzeRequest, ErrorResponse

router = APIRouter(prefix="/api", tags=["analyze"])


@router.post("/analyze")
def analyze_question(
    req: AnalyzeRequest,
    conn: sqlite3.Connection = Depends(get_db),
    llm: LLMClient = Depends(get_llm_client),
    settings: Settings = Depends(get_settings),
):
    """Turn a business question into SQL, run it, and return insights + chart type."""
    try:
        response = analyze(
            req.question,
            conn,
            llm,
            temperature=settings.llm_temperature,
            query_timeout=settings.query_timeout,
        )
        return response.model_dump(mode="json", by_alias=True)
    except InvalidQuestionError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except Exception as e:
        print(f"[analyze] Error: {e!r}")
        body = ErrorResponse(
            error=str(e),
            details=traceback.format_exc() if settings.is_development else None,
        )
        return JSONResponse(status_code=500, content=body.model_dump(exclude_none=True))
