"""
Health checks - for load balancers, Kubernetes, and monitoring.
Challenge: Fast liveness; dependency checks for readiness.
"""

import logging
from typing import Annotated

from elasticsearch import AsyncElasticsearch
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from redis.asyncio import Redis

from library.cache.redis_client import get_redis
from library.config import get_settings
from library.search.elasticsearch_client import get_elasticsearch

logger = logging.getLogger(__name__)

router = APIRouter()
settings = get_settings()


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(
    es: Annotated[AsyncElasticsearch, Depends(get_elasticsearch)],
    redis: Annotated[Redis, Depends(get_redis)],
):
    """Readiness: both stores answer a ping."""
    checks = {}
    try:
        checks["elasticsearch"] = bool(await es.ping())
    except Exception as e:
        logger.warning("elasticsearch ping failed: %s", e)
        checks["elasticsearch"] = False
    try:
        checks["redis"] = bool(await redis.ping())
    except Exception as e:
        logger.warning("redis ping failed: %s", e)
        checks["redis"] = False
    if all(checks.values()):
        return {"status": "ready", "checks": checks}
    return JSONResponse(status_code=503, content={"status": "unavailable", "checks": checks})
