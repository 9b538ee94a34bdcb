import logging

from fastapi import FastAPI

from pushbridge.api.routers import bridge, health
from pushbridge.bridge.registry import PluginRegistry
from pushbridge.bridge.status import StatusBridge
from pushbridge.core.config import Settings, get_settings
from pushbridge.core.logging import configure_logging
from pushbridge.services.gate import ServiceGate
from pushbridge.services.state import HostContext

configure_logging()

logger = logging.getLogger(__name__)


def build_context(settings: Settings) -> HostContext:
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    return HostContext(
        app_name=settings.app_name,
        credentials_path=settings.firebase_credentials_path,
        options=options,
    )


def create_app(settings: Settings | None = None, gate: ServiceGate | None = None) -> FastAPI:
    settings = settings or get_settings()
    gate = gate or ServiceGate.from_settings(settings)
    context = build_context(settings)

    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.state.settings = settings
    app.state.gate = gate
    app.state.context = context

    if not gate.ensure_initialized(context):
        logger.error("Push SDK not ready. Push notifications will fail until credentials are configured.")

    registry = PluginRegistry()
    registry.register(StatusBridge(gate, context, name=settings.bridge_plugin_name))
    app.state.registry = registry

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(bridge.router, prefix="/bridge", tags=["bridge"])

    return app


app = create_app()
