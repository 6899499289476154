"""
In-memory repository adapters.
"""

from datetime import datetime, timezone

from exception_boundary.domain.user.entities import User
from exception_boundary.domain.user.ports import UserRepository
from exception_boundary.domain.video.entities import Video
from exception_boundary.domain.video.ports import VideoRepository

SEED_USERS = (
    User(
        id="u-1",
        email="ada@example.com",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    ),
)

SEED_VIDEOS = (
    Video(id="v-1", title="Getting started", duration_seconds=312),
)


class InMemoryUserRepository(UserRepository):
    """Dict-backed user store. Not thread-safe."""

    def __init__(self, users: tuple[User, ...] | list[User] = SEED_USERS) -> None:
        self._users: dict[str, User] = {user.id: user for user in users}

    def get(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def email_exists(self, email: str) -> bool:
        return any(user.email == email for user in self._users.values())

    def add(self, user: User) -> None:
        self._users[user.id] = user


class InMemoryVideoRepository(VideoRepository):
    def __init__(self, videos: tuple[Video, ...] | list[Video] = SEED_VIDEOS) -> None:
        self._videos: dict[str, Video] = {video.id: video for video in videos}

    def get(self, video_id: str) -> Video | None:
        return self._videos.get(video_id)
