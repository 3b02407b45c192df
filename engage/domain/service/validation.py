"""Input normalization shared by the engagement services."""

from typing import Iterable, Optional

from pydantic import ValidationError as PydanticValidationError

from engage.domain.error import ValidationError
from engage.domain.value import Hashtag
from engage.domain.value.types import dedupe, extract_inline_hashtags

MAX_TAG_LENGTH = 100


def require_text(text: str, max_length: int, field: str = "text") -> str:
    """Reject blank or over-long text. The original text is returned unchanged."""
    if not text or not text.strip():
        raise ValidationError("Text must not be empty", field=field)
    if len(text) > max_length:
        raise ValidationError(
            f"Text must be at most {max_length} characters", field=field
        )
    return text


def normalize_hashtag(value: str, field: str = "hashtag") -> str:
    """Normalize a single hashtag ('#Family' -> 'family')."""
    try:
        return Hashtag(value).root
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid hashtag: {value!r}", field=field) from e


def normalize_hashtags(hashtags: Iterable[str], text: str = "") -> list[str]:
    """Normalize explicit hashtags and merge in '#tags' found in the text."""
    explicit = [normalize_hashtag(h, field="hashtags") for h in hashtags]
    return dedupe(explicit + extract_inline_hashtags(text))


def clean_tags(tags: Optional[Iterable[str]], field: str = "cultural_tags") -> list[str]:
    """Trim and de-duplicate free-form tags; empty tags are rejected."""
    cleaned: list[str] = []
    for tag in tags or []:
        value = tag.strip()
        if not value:
            raise ValidationError("Tags must not be empty", field=field)
        if len(value) > MAX_TAG_LENGTH:
            raise ValidationError(
                f"Tags must be at most {MAX_TAG_LENGTH} characters", field=field
            )
        cleaned.append(value)
    return dedupe(cleaned)


def clean_media_refs(media_refs: Optional[Iterable[str]]) -> list[str]:
    refs = [ref.strip() for ref in media_refs or []]
    if any(not ref for ref in refs):
        raise ValidationError("Media references must not be empty", field="media_refs")
    return refs


def check_cohort_level(cohort_level: Optional[int]) -> Optional[int]:
    if cohort_level is not None and cohort_level < 0:
        raise ValidationError("Cohort level must not be negative", field="cohort_level")
    return cohort_level


def check_sentiment(score: Optional[float]) -> Optional[float]:
    if score is not None and not -1.0 <= score <= 1.0:
        raise ValidationError(
            "Sentiment score must be between -1 and 1", field="sentiment_score"
        )
    return score


def check_language_code(code: Optional[str]) -> Optional[str]:
    if code is not None and not 1 <= len(code.strip()) <= 5:
        raise ValidationError(
            "Language code must be 1-5 characters", field="language_code"
        )
    return code.strip() if code is not None else None


def check_window(window_days: int, limit: int) -> None:
    """Validate trailing-window statistics parameters."""
    if not 1 <= window_days <= 365:
        raise ValidationError("Window must be 1-365 days", field="window_days")
    if not 1 <= limit <= 100:
        raise ValidationError("Limit must be 1-100", field="limit")
