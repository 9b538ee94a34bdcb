from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "pushbridge"
    debug: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    sdk_module: str = "firebase_admin"
    firebase_credentials_path: str | None = None
    firebase_project_id: str | None = None

    # False re-probes the SDK on every call so a late install is picked up
    gate_cache_resolution: bool = False

    bridge_plugin_name: str = "FirebaseStatus"
    bridge_base_url: str = "http://localhost:8000"
    bridge_timeout_seconds: float = 5.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
