"""
Permission view of one user on one project.
"""

from dataclasses import dataclass
from typing import Union

from phrasesync.core.exceptions import InvalidStateError
from .roles import Role, Visibility


@dataclass(frozen=True)
class ProjectPermissions:
    """Answers access questions from the project visibility and the user's role"""
    user_id: int
    visibility: Union[int, Visibility]
    role: Union[int, Role]

    def is_invitation_missing(self) -> bool:
        """
        Whether the user would need an invitation to access the project.

        Public projects never require one. Private projects require any
        role other than NONE.

        Raises:
            InvalidStateError: If visibility or role is not a known value
        """
        if self.visibility == Visibility.PUBLIC:
            return False
        elif self.visibility == Visibility.PRIVATE:
            if self.role == Role.ADMINISTRATOR:
                return False
            elif self.role == Role.DEVELOPER:
                return False
            elif self.role == Role.MODERATOR:
                return False
            elif self.role == Role.CONTRIBUTOR:
                return False
            elif self.role == Role.NONE:
                return True
            raise InvalidStateError(f"Unknown role {self.role}", {"role": self.role})
        raise InvalidStateError(
            f"Unknown visibility ID {self.visibility}", {"visibility": self.visibility}
        )
