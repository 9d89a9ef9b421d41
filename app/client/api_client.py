# /app/client/api_client.py

"""
Thin async HTTP client for the collab API, used by the polling views.

Every method returns the same result models the server produces, so callers
check `.success` exactly as they would server-side. Transport failures and
non-2xx statuses surface as `httpx.HTTPError`.
"""

from typing import Optional

import httpx

from app.models.chat_model import MessagesResult
from app.models.content_model import SessionStateResult
from app.models.result_model import ActionResult
from app.models.reward_model import RewardResult, RewardStatusResult
from app.models.user_model import LeaderboardResult, PointsResult

DEFAULT_TIMEOUT_SECONDS = 5.0


class CollabApiClient:
    def __init__(self, base_url: str = "", http_client: Optional[httpx.AsyncClient] = None):
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(base_url=base_url, timeout=DEFAULT_TIMEOUT_SECONDS)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "CollabApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _get(self, path: str, **params) -> dict:
        response = await self._http.get(path, params={k: v for k, v in params.items() if v is not None})
        response.raise_for_status()
        return response.json()

    async def _send(self, method: str, path: str, payload: dict) -> dict:
        response = await self._http.request(method, path, json=payload)
        response.raise_for_status()
        return response.json()

    # --- Sessions & chat ---

    async def get_session_state(self, session_id: str, user_name: Optional[str] = None) -> SessionStateResult:
        return SessionStateResult.model_validate(await self._get(f"/api/sessions/{session_id}", userName=user_name))

    async def update_content(self, session_id: str, text: str) -> ActionResult:
        return ActionResult.model_validate(await self._send("PUT", f"/api/sessions/{session_id}/content", {"content": text}))

    async def get_messages(self, room_key: str, limit: Optional[int] = None) -> MessagesResult:
        return MessagesResult.model_validate(await self._get(f"/api/chat/{room_key}/messages", limit=limit))

    async def post_message(self, room_key: str, text: str, sender_name: str) -> ActionResult:
        payload = {"text": text, "senderName": sender_name}
        return ActionResult.model_validate(await self._send("POST", f"/api/chat/{room_key}/messages", payload))

    # --- Points & rewards ---

    async def get_points(self, name: str) -> PointsResult:
        return PointsResult.model_validate(await self._get("/api/users/points", name=name))

    async def get_leaderboard(self) -> LeaderboardResult:
        return LeaderboardResult.model_validate(await self._get("/api/leaderboard"))

    async def reward(self, sender_name: str, rewarder_name: Optional[str] = None, content_id: Optional[str] = None) -> RewardResult:
        payload = {"senderName": sender_name, "rewarderName": rewarder_name, "contentId": content_id}
        return RewardResult.model_validate(await self._send("POST", "/api/rewards", payload))

    async def has_rewarded(self, rewarder_name: str, content_id: str) -> RewardStatusResult:
        return RewardStatusResult.model_validate(
            await self._get("/api/rewards/status", rewarderName=rewarder_name, contentId=content_id)
        )
