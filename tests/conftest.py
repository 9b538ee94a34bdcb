import httpx
import pytest
import pytest_asyncio

from pushbridge.core.config import Settings
from pushbridge.main import create_app
from pushbridge.services.dependency import Absent, Present
from pushbridge.services.gate import ServiceGate
from pushbridge.services.state import HostContext


class FakeSdkApi:
    """In-memory stand-in for the push SDK's instance registry."""

    def __init__(self, instances=None, init_error: Exception | None = None, max_inits: int = 1):
        self.instances = list(instances or [])
        self.init_error = init_error
        self.max_inits = max_inits
        self.init_calls = 0
        self.contexts = []

    def list_active_instances(self, context):
        return list(self.instances)

    def initialize_default_instance(self, context):
        self.init_calls += 1
        self.contexts.append(context)
        if self.init_calls > self.max_inits:
            pytest.fail("initialize_default_instance called more than once")
        if self.init_error is not None:
            raise self.init_error
        self.instances.append(object())


def absent_resolver():
    return Absent(module_name="missing_sdk", reason="No module named 'missing_sdk'")


@pytest.fixture
def context() -> HostContext:
    return HostContext(app_name="test-app", credentials_path="/tmp/creds.json")


@pytest.fixture
def sdk() -> FakeSdkApi:
    return FakeSdkApi()


@pytest.fixture
def gate(sdk) -> ServiceGate:
    return ServiceGate(lambda: Present(api=sdk))


@pytest.fixture
def make_sdk():
    return FakeSdkApi


@pytest.fixture
def missing_gate() -> ServiceGate:
    return ServiceGate(absent_resolver)


@pytest.fixture
def settings() -> Settings:
    return Settings(app_name="pushbridge-test", firebase_credentials_path="/tmp/creds.json")


@pytest_asyncio.fixture
async def client(settings, gate):
    app = create_app(settings=settings, gate=gate)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
