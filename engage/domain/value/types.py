"""Domain value objects for engagement.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Generic, Iterable, NamedTuple, TypeVar

from pydantic import Field, field_validator

from engage.domain.value.common import RootValueObject, ValueObject
from engage.domain.value.identifiers import ActorId

# ============================================================================
# REACTIONS
# ============================================================================


class ReactionCategory(str, Enum):
    """Grouping of reaction types."""

    CORE = "core"
    FAMILY = "family"
    GENERATIONAL = "generational"
    CULTURAL = "cultural"


class ReactionType(str, Enum):
    """Closed taxonomy of reactions.

    Every member belongs to exactly one ``ReactionCategory`` and carries
    presentation metadata (display name, icon, color).
    """

    # Core emotional reactions
    LIKE = "like"
    LOVE = "love"
    HEART = "heart"
    LAUGH = "laugh"
    WOW = "wow"
    SAD = "sad"
    ANGRY = "angry"

    # Family reactions
    BLESSING = "blessing"
    PRIDE = "pride"
    GRATITUDE = "gratitude"
    MEMORY = "memory"
    WISDOM = "wisdom"
    TRADITION = "tradition"
    RESPECT = "respect"
    HONOR = "honor"
    LEGACY = "legacy"
    HERITAGE = "heritage"

    # Generational reactions
    GRANDPARENT = "grandparent"
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"

    # Cultural reactions
    NAMASTE = "namaste"
    OM = "om"
    FESTIVAL = "festival"
    PRAYER = "prayer"
    RITUAL = "ritual"

    @property
    def category(self) -> ReactionCategory:
        return _REACTION_METADATA[self].category

    @property
    def display_name(self) -> str:
        return _REACTION_METADATA[self].display_name

    @property
    def icon(self) -> str:
        return _REACTION_METADATA[self].icon

    @property
    def color(self) -> str:
        return _REACTION_METADATA[self].color

    @classmethod
    def parse(cls, value: str) -> "ReactionType | None":
        """Look up a reaction type by value or name, case-insensitively."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def in_category(cls, category: ReactionCategory) -> list["ReactionType"]:
        """All reaction types of a category, in taxonomy order."""
        return [member for member in cls if member.category == category]


class _ReactionMetadata(NamedTuple):
    display_name: str
    icon: str
    color: str
    category: ReactionCategory


_REACTION_METADATA: dict[ReactionType, _ReactionMetadata] = {
    ReactionType.LIKE: _ReactionMetadata("Like", "👍", "#4CAF50", ReactionCategory.CORE),
    ReactionType.LOVE: _ReactionMetadata("Love", "❤️", "#E91E63", ReactionCategory.CORE),
    ReactionType.HEART: _ReactionMetadata("Heart", "💖", "#F06292", ReactionCategory.CORE),
    ReactionType.LAUGH: _ReactionMetadata("Laugh", "😂", "#FF9800", ReactionCategory.CORE),
    ReactionType.WOW: _ReactionMetadata("Wow", "😮", "#9C27B0", ReactionCategory.CORE),
    ReactionType.SAD: _ReactionMetadata("Sad", "😢", "#607D8B", ReactionCategory.CORE),
    ReactionType.ANGRY: _ReactionMetadata("Angry", "😠", "#F44336", ReactionCategory.CORE),
    ReactionType.BLESSING: _ReactionMetadata(
        "Blessing", "🙏", "#8BC34A", ReactionCategory.FAMILY
    ),
    ReactionType.PRIDE: _ReactionMetadata("Pride", "🏆", "#FFC107", ReactionCategory.FAMILY),
    ReactionType.GRATITUDE: _ReactionMetadata(
        "Gratitude", "🙏", "#4CAF50", ReactionCategory.FAMILY
    ),
    ReactionType.MEMORY: _ReactionMetadata(
        "Memory", "🧠", "#9E9E9E", ReactionCategory.FAMILY
    ),
    ReactionType.WISDOM: _ReactionMetadata(
        "Wisdom", "🧙‍♂️", "#795548", ReactionCategory.FAMILY
    ),
    ReactionType.TRADITION: _ReactionMetadata(
        "Tradition", "🏛️", "#3F51B5", ReactionCategory.FAMILY
    ),
    ReactionType.RESPECT: _ReactionMetadata(
        "Respect", "🙇‍♂️", "#795548", ReactionCategory.FAMILY
    ),
    ReactionType.HONOR: _ReactionMetadata("Honor", "👑", "#FFD700", ReactionCategory.FAMILY),
    ReactionType.LEGACY: _ReactionMetadata(
        "Legacy", "📜", "#8D6E63", ReactionCategory.FAMILY
    ),
    ReactionType.HERITAGE: _ReactionMetadata(
        "Heritage", "🏛️", "#5D4037", ReactionCategory.FAMILY
    ),
    ReactionType.GRANDPARENT: _ReactionMetadata(
        "Grandparent", "👴", "#9E9E9E", ReactionCategory.GENERATIONAL
    ),
    ReactionType.PARENT: _ReactionMetadata(
        "Parent", "👨", "#607D8B", ReactionCategory.GENERATIONAL
    ),
    ReactionType.CHILD: _ReactionMetadata(
        "Child", "👶", "#FF9800", ReactionCategory.GENERATIONAL
    ),
    ReactionType.SIBLING: _ReactionMetadata(
        "Sibling", "👫", "#E91E63", ReactionCategory.GENERATIONAL
    ),
    ReactionType.NAMASTE: _ReactionMetadata(
        "Namaste", "🙏", "#4CAF50", ReactionCategory.CULTURAL
    ),
    ReactionType.OM: _ReactionMetadata("Om", "🕉️", "#9C27B0", ReactionCategory.CULTURAL),
    ReactionType.FESTIVAL: _ReactionMetadata(
        "Festival", "🎉", "#FF5722", ReactionCategory.CULTURAL
    ),
    ReactionType.PRAYER: _ReactionMetadata(
        "Prayer", "🙏", "#795548", ReactionCategory.CULTURAL
    ),
    ReactionType.RITUAL: _ReactionMetadata(
        "Ritual", "🕯️", "#3F51B5", ReactionCategory.CULTURAL
    ),
}


MIN_INTENSITY = 1
MAX_INTENSITY = 5

INTENSITY_DESCRIPTIONS: dict[int, str] = {
    1: "Very Low",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Very High",
}


class IntensityLevel(str, Enum):
    """Coarse intensity band."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def of(cls, intensity: int) -> "IntensityLevel":
        if intensity <= 2:
            return cls.LOW
        if intensity == 3:
            return cls.MEDIUM
        return cls.HIGH


class ReactionTypeInfo(ValueObject):
    """Presentation metadata for a reaction type."""

    reaction_type: ReactionType
    display_name: str
    icon: str
    color: str
    category: ReactionCategory

    @classmethod
    def of(cls, reaction_type: ReactionType) -> "ReactionTypeInfo":
        return cls(
            reaction_type=reaction_type,
            display_name=reaction_type.display_name,
            icon=reaction_type.icon,
            color=reaction_type.color,
            category=reaction_type.category,
        )


# ============================================================================
# COMMENT LIFECYCLE
# ============================================================================


class VisibilityStatus(str, Enum):
    """Whether a comment is live or soft-deleted."""

    ACTIVE = "active"
    DELETED = "deleted"


class ModerationStatus(str, Enum):
    """Moderation state of a comment.

    Transitions:
    - PENDING -> APPROVED | REJECTED | FLAGGED
    - FLAGGED -> APPROVED | REJECTED | FLAGGED
    - APPROVED | REJECTED | AUTO_APPROVED -> FLAGGED
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    FLAGGED = "flagged"
    AUTO_APPROVED = "auto_approved"

    @property
    def is_public(self) -> bool:
        """Whether comments in this state are visible to everyone."""
        return self in (ModerationStatus.APPROVED, ModerationStatus.AUTO_APPROVED)

    @property
    def awaits_review(self) -> bool:
        """Whether comments in this state belong in the moderation queue."""
        return self in (ModerationStatus.PENDING, ModerationStatus.FLAGGED)

    def can_transition_to(self, target: "ModerationStatus") -> bool:
        return target in _MODERATION_TRANSITIONS[self]

    @classmethod
    def public_statuses(cls) -> frozenset["ModerationStatus"]:
        return frozenset(s for s in cls if s.is_public)


_MODERATION_TRANSITIONS: dict[ModerationStatus, frozenset[ModerationStatus]] = {
    ModerationStatus.PENDING: frozenset(
        {ModerationStatus.APPROVED, ModerationStatus.REJECTED, ModerationStatus.FLAGGED}
    ),
    ModerationStatus.FLAGGED: frozenset(
        {ModerationStatus.APPROVED, ModerationStatus.REJECTED, ModerationStatus.FLAGGED}
    ),
    ModerationStatus.APPROVED: frozenset({ModerationStatus.FLAGGED}),
    ModerationStatus.REJECTED: frozenset({ModerationStatus.FLAGGED}),
    ModerationStatus.AUTO_APPROVED: frozenset({ModerationStatus.FLAGGED}),
}


class AuditAction(str, Enum):
    """Kind of audited lifecycle event."""

    FLAGGED = "flagged"
    APPROVED = "approved"
    REJECTED = "rejected"
    DELETED = "deleted"


class CommentSortOrder(str, Enum):
    """Sort order for comment listings.

    Ties are always broken by comment id so pagination is stable.
    """

    RECENT = "recent"  # created_at descending
    OLDEST = "oldest"  # created_at ascending
    TOP = "top"  # like_count descending, then newest


class Actor(ValueObject):
    """Caller identity supplied by the gateway."""

    id: ActorId
    is_moderator: bool = False


class EditEntry(ValueObject):
    """One entry of a comment's edit history."""

    edited_at: datetime
    editor_id: ActorId
    reason: str | None = None


class AuditEntry(ValueObject):
    """One moderation or deletion event on a comment."""

    actor_id: ActorId
    action: AuditAction
    reason: str | None = None
    occurred_at: datetime


# ============================================================================
# TAGS
# ============================================================================

_HASHTAG_PATTERN = re.compile(r"^[a-z0-9_-]{1,50}$")
_INLINE_HASHTAG_PATTERN = re.compile(r"(?<![\w#&])#([A-Za-z0-9_-]+)")


class Hashtag(RootValueObject[str]):
    """Normalized hashtag.

    Leading '#' is stripped and the token lower-cased. The result must be
    1-50 characters of lowercase letters, digits, '_' or '-'.
    Examples: 'family', 'diwali-2024', 'grandmas_recipes'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Strip '#' and whitespace, lower-case."""
        if isinstance(v, str):
            return v.strip().lstrip("#").lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_hashtag(cls, v: str) -> str:
        """Validate hashtag format."""
        if not _HASHTAG_PATTERN.match(v):
            raise ValueError(
                "Hashtag must be 1-50 characters of letters, digits, '_' or '-'"
            )
        return v


def extract_inline_hashtags(text: str) -> list[str]:
    """Find '#tag' tokens inside free text, normalized and de-duplicated."""
    found: list[str] = []
    for match in _INLINE_HASHTAG_PATTERN.finditer(text):
        token = match.group(1).lower()
        if len(token) <= 50 and token not in found:
            found.append(token)
    return found


V = TypeVar("V")


def dedupe(values: Iterable[V]) -> list[V]:
    """De-duplicate while preserving first-seen order."""
    seen: list[V] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


# ============================================================================
# PAGINATION
# ============================================================================

T = TypeVar("T")


class PageRequest(ValueObject):
    """Zero-based page request."""

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1, le=100)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(ValueObject, Generic[T]):
    """One page of results plus the total match count."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total
