from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from pushbridge.api import deps
from pushbridge.core.errors import MethodNotFound, PluginNotFound

router = APIRouter()


@router.get("/plugins")
async def list_plugins(registry=Depends(deps.get_registry)):
    return {"plugins": registry.names()}


# Plain def: handlers call the SDK synchronously, so run them in the threadpool
@router.post("/{plugin}/{method}")
def call_plugin(
    plugin: str,
    method: str,
    payload: dict[str, Any] | None = Body(default=None),
    registry=Depends(deps.get_registry),
):
    try:
        return registry.dispatch(plugin, method, payload)
    except PluginNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Plugin {plugin} not found")
    except MethodNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"Method {plugin}.{method} not found"
        )
