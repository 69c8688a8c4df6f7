"""HTTP request executor for the Waxpeer REST API."""

import asyncio
import logging
import time
from collections import deque
from enum import Enum
from typing import Any, Callable, Deque, Iterable, Mapping, Optional, Tuple, Union
from urllib.parse import urlencode

import aiohttp

from ..config.settings import ApiConfig
from ..exceptions import RateLimitExceeded, WaxpeerHTTPError, WaxpeerRequestError

logger = logging.getLogger(__name__)

Query = Union[Mapping[str, Any], Iterable[Tuple[str, Any]], None]


def build_query(params: Query) -> str:
    """
    Encode query parameters.

    ``None`` values are dropped, lists and tuples expand to repeated keys
    (``id=1&id=2``) and enum members are sent by value.
    """
    if not params:
        return ""

    items = params.items() if isinstance(params, Mapping) else params
    pairs = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _query_value(v)) for v in value if v is not None)
        else:
            pairs.append((key, _query_value(value)))
    return urlencode(pairs)


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


class SlidingWindowRateLimiter:
    """Non-blocking sliding-window limiter: at most ``limit`` calls per ``window_seconds``."""

    def __init__(self, limit: int, window_seconds: float, clock: Callable[[], float] = time.monotonic):
        self.limit = limit
        self.window_seconds = window_seconds
        self.clock = clock
        self._calls: Deque[float] = deque()

    def try_acquire(self) -> bool:
        """Take a slot if one is free in the current window."""
        now = self.clock()
        while self._calls and now - self._calls[0] >= self.window_seconds:
            self._calls.popleft()

        if len(self._calls) >= self.limit:
            return False

        self._calls.append(now)
        return True

    @property
    def remaining(self) -> int:
        now = self.clock()
        active = sum(1 for ts in self._calls if now - ts < self.window_seconds)
        return max(self.limit - active, 0)


class RequestExecutor:
    """Issues authenticated GET/POST calls and returns the decoded JSON body."""

    def __init__(self, api_key: str, config: Optional[ApiConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.api_key = api_key
        self.config = config or ApiConfig()
        self.session = session
        self._owns_session = session is None

        self.prices_limiter = SlidingWindowRateLimiter(
            self.config.prices_rate_limit, self.config.rate_limit_window_seconds
        )
        self.prices_dopplers_limiter = SlidingWindowRateLimiter(
            self.config.prices_dopplers_rate_limit, self.config.rate_limit_window_seconds
        )

    async def __aenter__(self):
        await self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Close the HTTP session if this executor created it."""
        if self.session and self._owns_session and not self.session.closed:
            await self.session.close()

    async def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout_seconds),
                headers={'Accept-Encoding': 'gzip,deflate'}
            )
            self._owns_session = True
        return self.session

    def build_url(self, path: str, query: Query = None) -> str:
        """Build ``<base>/<path>?api=<key>[&<query>]``."""
        url = f"{self.config.base_url.rstrip('/')}/{path}?{urlencode({'api': self.api_key})}"
        encoded = query if isinstance(query, str) else build_query(query)
        if encoded:
            url += f"&{encoded}"
        return url

    async def get(self, path: str, query: Query = None) -> Any:
        return await self._request('GET', path, query=query)

    async def post(self, path: str, body: Optional[Any] = None, query: Query = None) -> Any:
        return await self._request('POST', path, body=body, query=query)

    def acquire_prices(self) -> None:
        """Consume one ``prices`` slot or fail without touching the network."""
        if not self.prices_limiter.try_acquire():
            logger.warning("Local rate limit reached for prices")
            raise RateLimitExceeded('prices')

    def acquire_prices_dopplers(self) -> None:
        """Consume one ``prices/dopplers`` slot or fail without touching the network."""
        if not self.prices_dopplers_limiter.try_acquire():
            logger.warning("Local rate limit reached for prices/dopplers")
            raise RateLimitExceeded('prices/dopplers')

    async def _request(self, method: str, path: str, body: Optional[Any] = None,
                       query: Query = None) -> Any:
        """Make one HTTP call; no retries."""
        session = await self._get_session()
        url = self.build_url(path, query)

        logger.debug(f"{method} /{path}")

        try:
            async with session.request(method, url, json=body) as response:
                payload = await self._decode(response)

                if response.status >= 400:
                    logger.error(f"{method} /{path} failed with HTTP {response.status}")
                    raise WaxpeerHTTPError(response.status, path, payload)

                return payload

        except asyncio.TimeoutError as e:
            logger.error(f"{method} /{path} timed out after {self.config.request_timeout_seconds}s")
            raise WaxpeerRequestError(method, path, "request timed out") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} /{path} transport error: {e}")
            raise WaxpeerRequestError(method, path, str(e)) from e

    @staticmethod
    async def _decode(response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        if not text:
            return None
        try:
            return await response.json(content_type=None)
        except ValueError:
            return text
