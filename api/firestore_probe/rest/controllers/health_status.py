"""
Handles GET requests to the /api/test/health endpoint.
"""
from __future__ import annotations

from logging import getLogger

from sanic import Request, json
from sanic_ext import openapi

from firestore_probe.models.responses import HealthStatus

logger = getLogger(__name__)


@openapi.definition(response=HealthStatus.schema_json())
async def on_get_health_status(request: Request) -> json:
    """
    Handles GET requests to the /api/test/health endpoint. Does not touch the database.

    :param request: The Sanic request object.
    """
    return json(HealthStatus(status="API running").dict(), status=200)
