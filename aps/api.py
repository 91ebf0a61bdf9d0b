# aps/api.py

import logging
from typing import Any

import requests

from aps.config import config
from aps.exceptions import FetchError

logger = logging.getLogger(__name__)


class FlathubClient:
    """
    Minimal Flathub API v2 client. Bodies come back as raw text; callers
    decide whether and how to parse them.
    """

    def __init__(self, api_url: str | None = None, locale: str | None = None,
                 timeout: float | None = None, session: requests.Session | None = None):
        self.api_url = (api_url or config.api_url).rstrip("/")
        self.locale = locale or config.locale
        self.timeout = config.http_timeout if timeout is None else timeout
        self.session = session or requests.Session()

    def search(self, payload: dict[str, Any]) -> str:
        url = f"{self.api_url}/search"
        logger.debug("POST %s locale=%s body=%s", url, self.locale, payload)
        try:
            r = self.session.post(url, params={"locale": self.locale}, json=payload,
                                  timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Search request failed: {e}") from e
        logger.debug("POST %s → %s", url, r.status_code)
        return r.text

    def appstream(self, app_id: str) -> str:
        return self._get_text(f"appstream/{app_id}")

    def app(self, app_id: str) -> str:
        return self._get_text(f"apps/{app_id}")

    def _get_text(self, path: str) -> str:
        # transport failures read as an empty (invalid) body
        url = f"{self.api_url}/{path}"
        try:
            r = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug("GET %s failed: %s", url, e)
            return ""
        logger.debug("GET %s → %s", url, r.status_code)
        return r.text
