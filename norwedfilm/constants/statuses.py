# norwedfilm/constants/statuses.py
"""
Closed value sets for the enum-like text columns, and the status
transitions the admin layer accepts for each lifecycle.
"""

from enum import Enum
from typing import Dict, FrozenSet, Type


class ProjectCategory(str, Enum):
    wedding_photo = "wedding-photo"
    wedding_video = "wedding-video"


class MediaType(str, Enum):
    image = "image"
    video = "video"


class SettingType(str, Enum):
    text = "text"
    image = "image"
    json = "json"
    boolean = "boolean"


class ContactStatus(str, Enum):
    new = "new"
    read = "read"
    replied = "replied"
    archived = "archived"


class SubscriberStatus(str, Enum):
    active = "active"
    unsubscribed = "unsubscribed"


class BookingStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    completed = "completed"
    cancelled = "cancelled"


class CommentStatus(str, Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    spam = "spam"


def _unrestricted(enum_cls: Type[Enum]) -> Dict[str, FrozenSet[str]]:
    values = frozenset(member.value for member in enum_cls)
    return {value: values for value in values}


# Every lifecycle is currently unconstrained: any value of the enum may follow
# any other. Tighten a row here to forbid a transition.
STATUS_TRANSITIONS: Dict[Type[Enum], Dict[str, FrozenSet[str]]] = {
    ContactStatus: _unrestricted(ContactStatus),
    SubscriberStatus: _unrestricted(SubscriberStatus),
    BookingStatus: _unrestricted(BookingStatus),
    CommentStatus: _unrestricted(CommentStatus),
}


def can_transition(enum_cls: Type[Enum], current: str | None, target: str) -> bool:
    allowed = STATUS_TRANSITIONS[enum_cls]
    if current is None or current not in allowed:
        # Legacy rows without a recognised status may move anywhere.
        return target in {member.value for member in enum_cls}
    return target in allowed[current]
