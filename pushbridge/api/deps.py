from fastapi import Request

from pushbridge.bridge.registry import PluginRegistry
from pushbridge.services.gate import ServiceGate
from pushbridge.services.state import HostContext


def get_registry(request: Request) -> PluginRegistry:
    return request.app.state.registry


def get_gate(request: Request) -> ServiceGate:
    return request.app.state.gate


def get_context(request: Request) -> HostContext:
    return request.app.state.context
