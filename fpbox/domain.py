from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Plant:
    id: str
    name: str
    common_name: Optional[str] = None


@dataclass(frozen=True)
class User:
    id: int
    name: str


@dataclass(frozen=True)
class Post:
    id: int
    user_id: int
    title: str
