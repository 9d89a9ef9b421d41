# /app/client/polling.py

"""
Fixed-interval polling.

Each named poll fetches once immediately, then again every `interval`
seconds until cancelled. There is no backoff and no jitter: classroom-scale
traffic makes the simple cadence the right one. A failed fetch is logged and
the next tick tries again.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Dict, List

import httpx
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

Fetch = Callable[[], Awaitable[None]]


class PollIntervals(BaseModel):
    content: float = Field(default=2.0, gt=0)
    chat: float = Field(default=3.0, gt=0)
    points: float = Field(default=5.0, gt=0)
    leaderboard: float = Field(default=10.0, gt=0)


DEFAULT_INTERVALS = PollIntervals()


class PollingScheduler:
    def __init__(self):
        self._tasks: Dict[str, asyncio.Task] = {}
        self._fetchers: Dict[str, Fetch] = {}

    @property
    def active(self) -> List[str]:
        return [name for name, task in self._tasks.items() if not task.done()]

    def start(self, name: str, fetch: Fetch, interval: float) -> None:
        """Must be called from inside a running event loop."""
        if name in self._tasks and not self._tasks[name].done():
            raise ValueError(f"Poll '{name}' is already running")
        self._fetchers[name] = fetch
        self._tasks[name] = asyncio.create_task(self._run(name, fetch, interval), name=f"poll:{name}")

    async def refresh_now(self, name: str) -> None:
        """Out-of-band fetch layered on top of the regular cadence."""
        if name not in self._fetchers:
            raise ValueError(f"Poll '{name}' was never started")
        await self._fetch_once(name, self._fetchers[name])

    async def cancel_all(self) -> None:
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

    async def _run(self, name: str, fetch: Fetch, interval: float) -> None:
        while True:
            await self._fetch_once(name, fetch)
            await asyncio.sleep(interval)

    async def _fetch_once(self, name: str, fetch: Fetch) -> None:
        try:
            await fetch()
        except httpx.HTTPError as e:
            logger.warning("Poll '%s' failed: %s", name, e)
        except Exception:
            logger.exception("Poll '%s' fetch raised; retrying on the next tick", name)
