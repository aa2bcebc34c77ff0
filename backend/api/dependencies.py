"""Shared dependencies for API routes."""

from fastapi import Request

from services.gemini_client import GeminiClient


def get_gemini_client(request: Request) -> GeminiClient:
    return request.app.state.gemini_client
