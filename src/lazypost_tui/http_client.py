"""
Blocking HTTP issuer.

Runs inside a worker thread; the event loop only ever sees the
RequestOutcome it returns.
"""

import logging
import time
from typing import Optional

import requests

from .core.models import HttpRequest, RequestOutcome

logger = logging.getLogger(__name__)


class RequestIssuer:
    def __init__(
        self,
        timeout: float = 30.0,
        verify_tls: bool = True,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.session = session or requests.Session()

    def issue(self, request: HttpRequest) -> RequestOutcome:
        """Send `request` and wait for the response. Never raises for network errors."""
        logger.info("%s %s", request.method, request.url)
        start = time.perf_counter()

        try:
            response = self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.body.encode("utf-8") if request.body else None,
                timeout=self.timeout,
                verify=self.verify_tls,
            )
        except (requests.RequestException, ValueError) as e:
            # ValueError: header values outside latin-1, unparsable URLs
            duration_ms = (time.perf_counter() - start) * 1000
            logger.warning("Request to %s failed: %s", request.url, e)
            return RequestOutcome(error=str(e), duration_ms=duration_ms)

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("%s %s -> %s in %.1fms", request.method, request.url, response.status_code, duration_ms)

        return RequestOutcome(
            status_code=response.status_code,
            reason=response.reason or "",
            headers=dict(response.headers),
            body=response.text,
            duration_ms=duration_ms,
        )

    def close(self) -> None:
        self.session.close()
