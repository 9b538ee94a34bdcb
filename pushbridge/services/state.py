from dataclasses import dataclass
from enum import Enum


class ServiceState(str, Enum):
    UNINITIALIZED = "UNINITIALIZED"
    READY = "READY"
    UNAVAILABLE = "UNAVAILABLE"


class GateFailure(str, Enum):
    DEPENDENCY_MISSING = "dependency_missing"
    CALL_FAILED = "call_failed"


@dataclass(frozen=True)
class GateResult:
    state: ServiceState
    failure: GateFailure | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.state == ServiceState.READY


@dataclass(frozen=True)
class HostContext:
    """Platform handle handed through the gate to the SDK adapter untouched."""

    app_name: str
    credentials_path: str | None = None
    options: dict[str, str] | None = None
