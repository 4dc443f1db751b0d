from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal

ChatRole = Literal["user", "assistant"]
_ROLES = ("user", "assistant")


@dataclass(frozen=True)
class ChatTurn:
    """One message of a client-side chat conversation."""

    role: ChatRole
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.role not in _ROLES:
            raise ValueError(f"role must be one of {_ROLES}, got {self.role!r}")

    def to_dict(self) -> dict[str, str]:
        return {
            "role": self.role,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }
