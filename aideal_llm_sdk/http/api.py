"""FastAPI HTTP endpoints for the AI router.

This module provides REST API endpoints over ``AIRouter``.
It requires FastAPI to be installed (via the 'http' extra).
"""

from typing import Any, Dict, List, Optional

try:
    from fastapi import APIRouter, Depends, HTTPException
except ImportError:
    raise ImportError(
        "FastAPI is required for HTTP endpoints. "
        "Please install with: pip install aideal-llm-sdk[http]"
    )
from pydantic import BaseModel, Field

from ..api.client import get_default_router
from ..core.routing.router import AIRouter
from ..observability.logging import ProviderLogger
from ..providers.base import InvalidRequestError, ProviderError
from ..providers.errors import ErrorMapper

logger = ProviderLogger("http")

router = APIRouter()


class GenerateRequest(BaseModel):
    provider: str
    messages: List[Dict[str, Any]]
    options: Optional[Dict[str, Any]] = None


class TaskRequest(BaseModel):
    messages: List[Dict[str, Any]]
    options: Optional[Dict[str, Any]] = None


class CompareRequest(BaseModel):
    providers: List[str] = Field(..., min_length=1)
    messages: List[Dict[str, Any]]
    options: Optional[Dict[str, Any]] = None


def get_router() -> AIRouter:
    """Dependency returning the router that serves requests."""
    return get_default_router()


def _to_http_exception(error: Exception) -> HTTPException:
    if isinstance(error, InvalidRequestError):
        return HTTPException(status_code=400, detail=str(error))
    if isinstance(error, ProviderError):
        return HTTPException(status_code=error.status_code or 502, detail=str(error))
    if ErrorMapper.get_status_code(error) is not None:
        # Vendor API error
        return HTTPException(status_code=502, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))


@router.post("/generate")
async def generate(request: GenerateRequest, ai_router: AIRouter = Depends(get_router)):
    """Generate with an explicit provider."""
    try:
        response = await ai_router.generate_with_ai(request.provider, request.messages, request.options)
    except Exception as e:
        logger.error("Generate endpoint failed", error=e)
        raise _to_http_exception(e)
    return response.model_dump(mode="json")


@router.post("/tasks/{task_type}")
async def generate_for_task(task_type: str, request: TaskRequest,
                            ai_router: AIRouter = Depends(get_router)):
    """Generate with the provider mapped to ``task_type``."""
    try:
        response = await ai_router.generate_for_task(task_type, request.messages, request.options)
    except Exception as e:
        logger.error("Task endpoint failed", task_type=task_type, error=e)
        raise _to_http_exception(e)
    return response.model_dump(mode="json")


@router.post("/compare")
async def compare(request: CompareRequest, ai_router: AIRouter = Depends(get_router)):
    """Fan the request out to several providers; failures come back as placeholders."""
    try:
        responses = await ai_router.generate_with_multiple_ais(
            request.providers, request.messages, request.options
        )
    except Exception as e:
        logger.error("Compare endpoint failed", error=e)
        raise _to_http_exception(e)
    return {"results": [r.model_dump(mode="json") for r in responses]}


@router.get("/status")
async def status(ai_router: AIRouter = Depends(get_router)):
    """Configured/available flag per provider."""
    return {"providers": ai_router.get_provider_status()}
