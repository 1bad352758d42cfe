"""
Project visibility and member roles.

Role values are ordered by privilege: a lower value grants more rights.
"""

from enum import IntEnum
from typing import Union

from phrasesync.core.exceptions import InvalidStateError


class Visibility(IntEnum):
    """Who can see a project"""
    PUBLIC = 1
    PRIVATE = 2


class Role(IntEnum):
    """Role of a user within a project"""
    NONE = 0
    ADMINISTRATOR = 1
    DEVELOPER = 2
    MODERATOR = 3
    CONTRIBUTOR = 4


def coerce_visibility(value: Union[int, Visibility]) -> Visibility:
    try:
        return Visibility(value)
    except ValueError:
        raise InvalidStateError(f"Unknown visibility ID {value}", {"visibility": value}) from None


def coerce_role(value: Union[int, Role]) -> Role:
    try:
        return Role(value)
    except ValueError:
        raise InvalidStateError(f"Unknown role {value}", {"role": value}) from None


def get_visibility_title(visibility: Union[int, Visibility]) -> str:
    if visibility == Visibility.PUBLIC:
        return "public"
    elif visibility == Visibility.PRIVATE:
        return "private"
    raise InvalidStateError(f"Unknown visibility ID {visibility}", {"visibility": visibility})


def get_visibility_description(visibility: Union[int, Visibility]) -> str:
    if visibility == Visibility.PUBLIC:
        return "Visible to all signed-in users"
    elif visibility == Visibility.PRIVATE:
        return "Visible to invited users only"
    raise InvalidStateError(f"Unknown visibility ID {visibility}", {"visibility": visibility})


def is_role_allowed_to_move_phrases(role: Union[int, Role]) -> bool:
    return role in (Role.ADMINISTRATOR, Role.DEVELOPER)
