import logging
from typing import Any

from pushbridge.core.config import Settings, settings as default_settings
from pushbridge.core.errors import DependencyMissing, InitializationFailed
from pushbridge.services.dependency import Absent, Resolver, cached, module_resolver
from pushbridge.services.state import GateFailure, GateResult, ServiceState

logger = logging.getLogger(__name__)


class ServiceGate:
    """Initializes an optional external SDK at most once per process.

    The SDK's own registry of active instances is the only source of truth;
    the gate keeps no readiness flag and re-derives the state on every call.
    Failures are logged and reported through the return value, never raised.
    """

    def __init__(self, resolver: Resolver, cache_resolution: bool = False):
        self.resolver = cached(resolver) if cache_resolution else resolver

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ServiceGate":
        settings = settings or default_settings
        return cls(
            module_resolver(settings.sdk_module),
            cache_resolution=settings.gate_cache_resolution,
        )

    def ensure_initialized(self, context: Any) -> bool:
        return self.run(context).ok

    def run(self, context: Any) -> GateResult:
        try:
            dependency = self.resolver()
        except Exception as exc:
            # importable name but the module itself fails to load
            failed = InitializationFailed(f"SDK failed to load: {exc}")
            logger.error("%s. %s", failed, failed.remediation, exc_info=exc)
            return GateResult(
                state=ServiceState.UNAVAILABLE,
                failure=GateFailure.CALL_FAILED,
                detail=str(failed),
            )
        if isinstance(dependency, Absent):
            missing = DependencyMissing(
                f"{dependency.module_name} is not importable: {dependency.reason}"
            )
            logger.warning("%s. %s", missing, missing.remediation)
            return GateResult(
                state=ServiceState.UNAVAILABLE,
                failure=GateFailure.DEPENDENCY_MISSING,
                detail=str(missing),
            )

        try:
            if dependency.api.list_active_instances(context):
                return GateResult(state=ServiceState.READY)
            dependency.api.initialize_default_instance(context)
        except Exception as exc:
            failed = InitializationFailed(f"SDK initialization failed: {exc}")
            logger.error("%s. %s", failed, failed.remediation, exc_info=exc)
            return GateResult(
                state=ServiceState.UNAVAILABLE,
                failure=GateFailure.CALL_FAILED,
                detail=str(failed),
            )

        logger.info("Initialized default SDK instance")
        return GateResult(state=ServiceState.READY)

    def state(self, context: Any) -> ServiceState:
        """Report the current state without initializing anything."""
        try:
            dependency = self.resolver()
            if isinstance(dependency, Absent):
                return ServiceState.UNAVAILABLE
            instances = dependency.api.list_active_instances(context)
        except Exception:
            logger.exception("Listing SDK instances failed")
            return ServiceState.UNAVAILABLE
        return ServiceState.READY if instances else ServiceState.UNINITIALIZED
