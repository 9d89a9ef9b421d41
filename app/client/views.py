# /app/client/views.py

"""
Client views and the refresh contract each one follows.

- SessionView: session content every 2 s plus its chat room every 3 s.
- ChatView: one chat room (a session or "general") every 3 s.
- PointsDisplay: the signed-in user's balance every 5 s, and immediately
  after a local reward.
- LeaderboardView: rankings every 10 s.

Every view fetches once when opened and stops all polling when closed. Local
writes are followed by an immediate re-read of the affected state.
"""

from typing import Callable, List, Optional

from app.core.errors import ErrorCode
from app.models.chat_model import ChatMessageOut, GENERAL_ROOM
from app.models.content_model import SharedContent
from app.models.result_model import ActionResult
from app.models.reward_model import RewardResult
from app.models.user_model import UserProfile
from app.services.user_service import normalize_name

from .api_client import CollabApiClient
from .polling import DEFAULT_INTERVALS, PollIntervals, PollingScheduler


class _PollingView:
    def __init__(self, intervals: PollIntervals = DEFAULT_INTERVALS):
        self.intervals = intervals
        self.scheduler = PollingScheduler()

    async def open(self):
        raise NotImplementedError

    async def close(self) -> None:
        await self.scheduler.cancel_all()

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


class ChatView(_PollingView):
    def __init__(
        self,
        api: CollabApiClient,
        user_name: str,
        room_key: str = GENERAL_ROOM,
        on_messages: Optional[Callable[[List[ChatMessageOut]], None]] = None,
        intervals: PollIntervals = DEFAULT_INTERVALS,
    ):
        super().__init__(intervals)
        self.api = api
        self.user_name = user_name
        self.room_key = room_key
        self.on_messages = on_messages
        self.messages: List[ChatMessageOut] = []

    async def open(self) -> "ChatView":
        self.scheduler.start("chat", self._fetch_messages, self.intervals.chat)
        return self

    async def send(self, text: str) -> ActionResult:
        if not text.strip():
            return ActionResult.failure(ErrorCode.VALIDATION_ERROR, "Message cannot be empty")
        result = await self.api.post_message(self.room_key, text, self.user_name)
        if result.success:
            await self.scheduler.refresh_now("chat")
        return result

    async def _fetch_messages(self) -> None:
        result = await self.api.get_messages(self.room_key)
        if result.success:
            self.messages = result.messages
            if self.on_messages:
                self.on_messages(self.messages)


class PointsDisplay(_PollingView):
    def __init__(self, api: CollabApiClient, user_name: str, intervals: PollIntervals = DEFAULT_INTERVALS):
        super().__init__(intervals)
        self.api = api
        self.user_name = user_name
        self.points = 0

    async def open(self) -> "PointsDisplay":
        self.scheduler.start("points", self._fetch_points, self.intervals.points)
        return self

    async def refresh_now(self) -> None:
        await self.scheduler.refresh_now("points")

    async def _fetch_points(self) -> None:
        result = await self.api.get_points(self.user_name)
        if result.success and result.points is not None:
            self.points = result.points


class LeaderboardView(_PollingView):
    def __init__(self, api: CollabApiClient, intervals: PollIntervals = DEFAULT_INTERVALS):
        super().__init__(intervals)
        self.api = api
        self.teachers: List[UserProfile] = []
        self.students: List[UserProfile] = []

    async def open(self) -> "LeaderboardView":
        self.scheduler.start("leaderboard", self._fetch_leaderboard, self.intervals.leaderboard)
        return self

    async def _fetch_leaderboard(self) -> None:
        result = await self.api.get_leaderboard()
        if result.success:
            self.teachers = result.teachers
            self.students = result.students


class SessionView(_PollingView):
    """
    A live session as seen by a teacher or a student. The chat room of the
    session is polled by an embedded ChatView on its own cadence.
    """

    def __init__(
        self,
        api: CollabApiClient,
        session_id: str,
        user_name: str,
        is_teacher: bool = False,
        points_display: Optional[PointsDisplay] = None,
        on_content: Optional[Callable[[SharedContent], None]] = None,
        intervals: PollIntervals = DEFAULT_INTERVALS,
    ):
        super().__init__(intervals)
        self.api = api
        self.session_id = session_id
        self.user_name = user_name
        self.is_teacher = is_teacher
        self.points_display = points_display
        self.on_content = on_content
        self.content: Optional[SharedContent] = None
        self.chat = ChatView(api, user_name, room_key=session_id, intervals=intervals)

    async def open(self) -> "SessionView":
        self.scheduler.start("content", self._fetch_content, self.intervals.content)
        await self.chat.open()
        return self

    async def close(self) -> None:
        await self.chat.close()
        await super().close()

    @property
    def can_reward(self) -> bool:
        """Students may reward the sender of what they see, but never themselves."""
        if self.is_teacher or self.content is None:
            return False
        return normalize_name(self.content.senderName) != normalize_name(self.user_name)

    async def update_content(self, text: str) -> ActionResult:
        result = await self.api.update_content(self.session_id, text)
        if result.success:
            await self.scheduler.refresh_now("content")
        return result

    async def reward_sender(self) -> RewardResult:
        if not self.can_reward:
            return RewardResult.failure(ErrorCode.VALIDATION_ERROR, "Cannot reward this content")
        result = await self.api.reward(self.content.senderName, rewarder_name=self.user_name, content_id=self.session_id)
        if result.success and self.points_display is not None:
            await self.points_display.refresh_now()
        return result

    async def _fetch_content(self) -> None:
        result = await self.api.get_session_state(self.session_id, self.user_name)
        if result.success and result.content is not None:
            self.content = result.content
            if self.on_content:
                self.on_content(self.content)
