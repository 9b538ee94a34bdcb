import pytest

from pushbridge.bridge.registry import PluginRegistry
from pushbridge.bridge.status import StatusBridge
from pushbridge.core.errors import MethodNotFound, PluginNotFound
from pushbridge.services.dependency import Present
from pushbridge.services.gate import ServiceGate


class ExplodingGate:
    def ensure_initialized(self, context):
        raise RuntimeError("boom")


def test_ensure_initializes_once_and_reports_ready(gate, sdk, context):
    bridge = StatusBridge(gate, context)

    assert bridge.ensure() == {"ready": True}
    assert bridge.ensure() == {"ready": True}
    assert sdk.init_calls == 1


@pytest.mark.parametrize("state", ["missing", "init_error", "already_ready", "exploding"])
def test_ensure_always_resolves(state, make_sdk, missing_gate, context):
    if state == "missing":
        gate = missing_gate
        expected = False
    elif state == "init_error":
        sdk = make_sdk(init_error=FileNotFoundError("creds.json"))
        gate = ServiceGate(lambda: Present(api=sdk))
        expected = False
    elif state == "already_ready":
        sdk = make_sdk(instances=[object()], max_inits=0)
        gate = ServiceGate(lambda: Present(api=sdk))
        expected = True
    else:
        gate = ExplodingGate()
        expected = False

    response = StatusBridge(gate, context).ensure({})

    assert response == {"ready": expected}
    assert isinstance(response["ready"], bool)


def test_registry_dispatches_to_registered_plugin(gate, context):
    registry = PluginRegistry()
    registry.register(StatusBridge(gate, context))

    assert registry.is_available("FirebaseStatus")
    assert registry.names() == ["FirebaseStatus"]
    assert registry.dispatch("FirebaseStatus", "ensure") == {"ready": True}


def test_registry_rejects_duplicate_names(gate, context):
    registry = PluginRegistry()
    registry.register(StatusBridge(gate, context))

    with pytest.raises(ValueError):
        registry.register(StatusBridge(gate, context))


def test_registry_unknown_targets(gate, context):
    registry = PluginRegistry()
    registry.register(StatusBridge(gate, context), name="PushStatus")

    assert not registry.is_available("FirebaseStatus")
    with pytest.raises(PluginNotFound):
        registry.dispatch("FirebaseStatus", "ensure")
    with pytest.raises(MethodNotFound):
        registry.dispatch("PushStatus", "register")
