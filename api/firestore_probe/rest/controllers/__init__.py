"""Contains a function to register all controllers with the app."""
from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Callable

from sanic import Sanic, response

from firestore_probe.rest.controllers.firebase_probe import on_get_firebase_probe
from firestore_probe.rest.controllers.health_status import on_get_health_status

logger = getLogger(__name__)


@dataclass
class RouteConfig:
    handler: Callable[..., response.BaseHTTPResponse]
    uri: str
    methods: list[str]
    name: str


def register_routes(api: Sanic):
    """Registers all controllers with the app."""

    routes: list[RouteConfig] = [
        RouteConfig(on_get_health_status, "/api/test/health", ["GET"], "health_status"),
        RouteConfig(on_get_firebase_probe, "/api/test/firebase", ["GET"], "firebase_probe"),
    ]

    for route_config in routes:
        api.add_route(
            handler=route_config.handler,
            uri=route_config.uri,
            methods=route_config.methods,
            name=route_config.name,
        )
        logger.info("Registered %s %s controller", route_config.methods[0], route_config.uri)
