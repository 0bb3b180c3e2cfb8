from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field, model_validator


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class NavigationOptions:
    referer: str
    wait_until: str = "networkidle"


class ChallengeState(str, Enum):
    ACTIVE = "active"
    CLEARED = "cleared"
    TIMED_OUT = "timed_out"


class LoginOutcome(str, Enum):
    AUTHENTICATED = "authenticated"
    INVALID_CREDENTIALS = "invalid_credentials"
    AMBIGUOUS = "ambiguous"


class Cookie(BaseModel):
    """Browser cookie record, keyed the way the browser reports it."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str
    value: str
    domain: str = ""
    path: str = "/"
    expires: float = -1
    http_only: bool = Field(default=False, alias="httpOnly")
    secure: bool = False
    same_site: Optional[str] = Field(default=None, alias="sameSite")
    # Not reported by Playwright; filled in the way Chrome DevTools defines them
    size: int = 0
    session: bool = False

    @model_validator(mode="before")
    @classmethod
    def _devtools_fields(cls, data):
        if isinstance(data, dict):
            data = dict(data)
            data.setdefault("size", len(str(data.get("name") or "")) + len(str(data.get("value") or "")))
            data.setdefault("session", data.get("expires", -1) == -1)
        return data


@dataclass
class CapturedRequest:
    url: str
    headers: dict[str, str]
    cookies: list[Cookie] = field(default_factory=list)
    unique: Optional[str] = None


class Success(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "New session acquired"
    cookies: list[Cookie]
    headers: dict[str, str]
    unique: Optional[str] = None
    user_agent: Optional[str] = Field(default=None, alias="userAgent")

    @classmethod
    def from_capture(cls, captured: CapturedRequest) -> "Success":
        return cls(
            cookies=captured.cookies,
            headers=captured.headers,
            unique=captured.unique,
            user_agent=captured.headers.get("user-agent"),
        )

    def to_json(self) -> str:
        return self.model_dump_json(indent=2, by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class Failure:
    kind: str
    reason: str

    @classmethod
    def from_error(cls, error: Exception) -> "Failure":
        # Playwright and pydantic messages span several lines; the diagnostic is one
        lines = [line.strip() for line in str(error).splitlines() if line.strip()]
        return cls(kind=type(error).__name__, reason="; ".join(lines))

    def diagnostic(self) -> str:
        return f"{self.kind}: {self.reason}"


Result = Union[Success, Failure]
