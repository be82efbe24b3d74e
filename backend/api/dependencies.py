"""Shared dependencies for API routes."""

from services.llm_client import GeminiClient, get_client


def get_llm_client() -> GeminiClient | None:
    return get_client()
