"""
Models package for phrasesync.

Domain values (phrases, language sets, roles and permission views) plus the
ORM record read by the SQLAlchemy phrase store.
"""

from .phrase import Phrase
from .language_set import LanguageSet
from .roles import (
    Visibility,
    Role,
    coerce_visibility,
    coerce_role,
    get_visibility_title,
    get_visibility_description,
    is_role_allowed_to_move_phrases,
)
from .permissions import ProjectPermissions

__all__ = [
    "Phrase",
    "LanguageSet",
    "Visibility",
    "Role",
    "coerce_visibility",
    "coerce_role",
    "get_visibility_title",
    "get_visibility_description",
    "is_role_allowed_to_move_phrases",
    "ProjectPermissions",
]
