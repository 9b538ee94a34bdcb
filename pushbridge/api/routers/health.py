from fastapi import APIRouter, Depends

from pushbridge.api import deps
from pushbridge.services.state import ServiceState

router = APIRouter()


@router.get("/live")
async def live():
    return {"status": "ok"}


@router.get("/ready")
def ready(gate=Depends(deps.get_gate), context=Depends(deps.get_context)):
    state = gate.state(context)
    status = "ok" if state == ServiceState.READY else "degraded"
    return {"status": status, "push": state.value}
