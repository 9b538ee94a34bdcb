"""Optional SDK resolution.

The push SDK is never imported at module level. A resolver probes for it and
returns either ``Present`` wrapping a bound API or ``Absent`` carrying the
reason, so callers branch on a value instead of catching ImportError.
"""
import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Callable, Protocol, Sequence

logger = logging.getLogger(__name__)


class ExternalServiceApi(Protocol):
    def list_active_instances(self, context: Any) -> Sequence[Any] | None: ...

    def initialize_default_instance(self, context: Any) -> None: ...


@dataclass(frozen=True)
class Present:
    api: ExternalServiceApi


@dataclass(frozen=True)
class Absent:
    module_name: str
    reason: str


OptionalDependency = Present | Absent
Resolver = Callable[[], OptionalDependency]


class FirebaseAdminApi:
    """Binds the firebase_admin module to the gate's two-call API."""

    def __init__(self, module: ModuleType):
        self.module = module

    def list_active_instances(self, context: Any) -> list[Any]:
        try:
            return [self.module.get_app()]
        except ValueError:
            # get_app raises when the default app was never initialized
            return []

    def initialize_default_instance(self, context: Any) -> None:
        credentials_path = getattr(context, "credentials_path", None)
        options = getattr(context, "options", None) or None
        credential = None
        if credentials_path:
            credentials = importlib.import_module(f"{self.module.__name__}.credentials")
            credential = credentials.Certificate(credentials_path)
        self.module.initialize_app(credential, options)


def probe_module(
    module_name: str,
    binder: Callable[[ModuleType], ExternalServiceApi] = FirebaseAdminApi,
) -> OptionalDependency:
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        return Absent(module_name=module_name, reason=str(exc))
    logger.debug("Resolved optional dependency %s", module_name)
    return Present(api=binder(module))


def module_resolver(
    module_name: str,
    binder: Callable[[ModuleType], ExternalServiceApi] = FirebaseAdminApi,
) -> Resolver:
    return lambda: probe_module(module_name, binder)


def cached(resolver: Resolver) -> Resolver:
    resolution: list[OptionalDependency] = []

    def resolve() -> OptionalDependency:
        if not resolution:
            resolution.append(resolver())
        return resolution[0]

    return resolve
