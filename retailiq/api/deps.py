"""Request dependencies — process-wide resources created in the lifespan."""

from __future__ import annotations

import sqlite3

from fastapi import Request

from retailiq.adapters.llm_client import LLMClient
from retailiq.config import Settings, settings


def get_db(request: Request) -> sqlite3.Connection:
    return request.app.state.db


def get_llm_client(request: Request) -> LLMClient:
    return request.app.state.llm


def get_settings() -> Settings:
    return settings
