class GateError(Exception):
    """Base for failures absorbed by the service gate."""

    remediation: str = ""

    def __init__(self, message: str, remediation: str | None = None):
        super().__init__(message)
        if remediation is not None:
            self.remediation = remediation


class DependencyMissing(GateError):
    remediation = "Install the SDK, e.g. `pip install pushbridge[firebase]`."


class InitializationFailed(GateError):
    remediation = "Check that FIREBASE_CREDENTIALS_PATH points at a valid service account file."


class PluginNotFound(KeyError):
    pass


class MethodNotFound(KeyError):
    pass
