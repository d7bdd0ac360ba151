"""tianqiapi.com forecast client with retry and rate limit handling."""

import logging
import time

import httpx

from weatherview.config.defaults import DEFAULT_API_BASE_URL, DEFAULT_API_VERSION
from weatherview.config.schema import AppConfig

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherview/0.1.0"


class TianqiClient:
    def __init__(
        self,
        app_id: str,
        app_secret: str,
        base_url: str = DEFAULT_API_BASE_URL,
        version: str = DEFAULT_API_VERSION,
        unescape: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 10.0,
        max_retries: int = 2,
        retry_base_delay: float = 1.0,
    ):
        self.app_id = app_id
        self.app_secret = app_secret
        self.base_url = base_url
        self.version = version
        self.unescape = unescape
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    @classmethod
    def from_config(cls, config: AppConfig) -> "TianqiClient":
        return cls(
            app_id=config.api.app_id,
            app_secret=config.api.app_secret,
            base_url=config.api.base_url,
            version=config.api.version,
            unescape=config.api.unescape,
            timeout=config.transport.timeout_seconds,
            max_retries=config.transport.max_retries,
            retry_base_delay=config.transport.retry_base_delay,
        )

    def build_params(self, city_code: str) -> dict[str, str]:
        params = {
            "version": self.version,
            "appid": self.app_id,
            "appsecret": self.app_secret,
            "cityid": city_code,
        }
        if self.unescape:
            params = {"unescape": "1", **params}
        return params

    def get_forecast(self, city_code: str) -> bytes:
        """Fetch the multi-day forecast for a city code. Returns the raw body.

        Retries on 503/429 with exponential backoff.
        """
        params = self.build_params(city_code)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(
                    self.base_url, params=params, headers=headers, timeout=self.timeout
                )
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "tianqiapi returned %d for city %s, retrying in %.1fs (attempt %d/%d)",
                        resp.status_code, city_code, delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp.content
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "tianqiapi request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise
