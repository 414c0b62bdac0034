"""Domain value objects for remark.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import timedelta
from enum import Enum
from uuid import UUID

from pydantic import field_validator

from remark.domain.value.common import RootValueObject, ValueObject
from remark.domain.value.identifiers import CommentId

PATH_SEPARATOR = "."


class NotificationType(str, Enum):
    """Kind of notification delivered to a user."""

    COMMENT_REPLY = "comment_reply"
    MENTION = "mention"
    SYSTEM = "system"


class CommentPath(RootValueObject[tuple[CommentId, ...]]):
    """Materialized ancestry of a comment.

    Holds the ordered chain of strict ancestors, root first, excluding the
    comment's own id. Root comments have an empty path.

    Stored as dot-separated text (``"A.B"``); UUIDs never contain the
    separator, so text prefix matching on ``prefix + "."`` selects exactly
    the descendants of a node.
    """

    root: tuple[CommentId, ...] = ()

    @field_validator("root")
    @classmethod
    def validate_segments(cls, v: tuple[CommentId, ...]) -> tuple[CommentId, ...]:
        """Reject duplicate ancestors (a path can never contain a cycle)."""
        if len(set(v)) != len(v):
            raise ValueError("Comment path cannot repeat an ancestor")
        return v

    @classmethod
    def parse(cls, value: str | None) -> "CommentPath":
        """Build a path from its stored text form."""
        if not value:
            return cls(())
        return cls(tuple(CommentId(UUID(part)) for part in value.split(PATH_SEPARATOR)))

    @classmethod
    def child_path(cls, parent_id: CommentId, parent_path: "CommentPath") -> "CommentPath":
        """Path of a direct child of the given parent."""
        return cls(parent_path.root + (parent_id,))

    @property
    def is_root(self) -> bool:
        return not self.root

    @property
    def depth(self) -> int:
        """Number of ancestors, which is the depth of the owning comment."""
        return len(self.root)

    @property
    def root_id(self) -> CommentId | None:
        """First ancestor, or None when the owning comment is a root."""
        return self.root[0] if self.root else None

    def is_prefix_of(self, other: "CommentPath") -> bool:
        """Whether ``other`` starts with every segment of this path."""
        return other.root[: len(self.root)] == self.root

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(str(segment) for segment in self.root)


class MutationWindow(ValueObject):
    """Time limits for comment mutations.

    ``edit`` bounds both edit and delete (measured from creation),
    ``restore`` bounds restore (measured from deletion).
    """

    edit: timedelta = timedelta(minutes=15)
    restore: timedelta = timedelta(minutes=15)
