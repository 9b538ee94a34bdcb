import logging

import httpx

from pushbridge.core.config import settings

logger = logging.getLogger(__name__)


class BridgeClient:
    """Web-layer side of the bridge: decides whether push setup may proceed."""

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        plugin_name: str | None = None,
    ):
        self.http = http_client or httpx.AsyncClient(
            base_url=settings.bridge_base_url,
            timeout=settings.bridge_timeout_seconds,
        )
        self.plugin_name = plugin_name or settings.bridge_plugin_name

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "BridgeClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def is_plugin_available(self, name: str | None = None) -> bool:
        resp = await self.http.get("/bridge/plugins")
        resp.raise_for_status()
        return (name or self.plugin_name) in resp.json().get("plugins", [])

    async def ensure_push_ready(self) -> bool:
        try:
            if not await self.is_plugin_available():
                logger.warning("%s plugin unavailable; assuming SDK ready", self.plugin_name)
                return True
            resp = await self.http.post(f"/bridge/{self.plugin_name}/ensure", json={})
            resp.raise_for_status()
            ready = resp.json().get("ready")
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("SDK readiness check failed: %s", exc)
            return False

        if not ready:
            logger.error("SDK is not configured on the host. Skipping push registration.")
            return False
        logger.info("SDK ready, proceeding with push registration.")
        return True
