"""Comment discovery service."""

from typing import Optional

import logfire

from engage.domain.error import ValidationError
from engage.domain.model import Comment
from engage.domain.repository import CommentRepository
from engage.domain.value import (
    Actor,
    ActorId,
    CommentSortOrder,
    Page,
    PageRequest,
)

from .base import Service, paginate_comments, visible_comments
from .validation import check_cohort_level, normalize_hashtag

MAX_QUERY_LENGTH = 200


class DiscoveryService(Service):
    """Domain service for finding comments across content items.

    Every lookup only returns live comments the viewer is allowed to see.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize discovery service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def search(
        self,
        text: str,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """Case-insensitive substring search over comment text.

        Args:
            text: Search query (1-200 characters after trimming)
            page: Page request
            viewer: Viewing actor, None for anonymous
            sort: Result ordering

        Returns:
            Page of matching comments

        Raises:
            ValidationError: If the query is blank or too long
        """
        query = (text or "").strip()
        if not query:
            raise ValidationError("Search query must not be empty", field="q")
        if len(query) > MAX_QUERY_LENGTH:
            raise ValidationError(
                f"Search query must be at most {MAX_QUERY_LENGTH} characters",
                field="q",
            )

        with logfire.span("discovery_service.search", query=query, page=page.page):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, text_query=query),
                page,
                sort,
            )

    async def by_hashtag(
        self,
        hashtag: str,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """Comments carrying a hashtag. '#Family' and 'family' are the same tag.

        Raises:
            ValidationError: If the hashtag is malformed
        """
        tag = normalize_hashtag(hashtag)
        with logfire.span("discovery_service.by_hashtag", hashtag=tag, page=page.page):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, hashtag=tag),
                page,
                sort,
            )

    async def by_cultural_tag(
        self,
        tag: str,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """Comments carrying a cultural tag (exact match after trimming)."""
        value = (tag or "").strip()
        if not value:
            raise ValidationError("Tag must not be empty", field="tag")
        with logfire.span(
            "discovery_service.by_cultural_tag", tag=value, page=page.page
        ):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, cultural_tag=value),
                page,
                sort,
            )

    async def by_cohort(
        self,
        cohort_level: int,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """Comments written from one cohort level."""
        check_cohort_level(cohort_level)
        with logfire.span(
            "discovery_service.by_cohort", cohort_level=cohort_level, page=page.page
        ):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, cohort_level=cohort_level),
                page,
                sort,
            )

    async def by_author(
        self,
        author_id: ActorId,
        page: PageRequest,
        viewer: Optional[Actor] = None,
        sort: CommentSortOrder = CommentSortOrder.RECENT,
    ) -> Page[Comment]:
        """Comments written by one actor."""
        with logfire.span(
            "discovery_service.by_author", author_id=str(author_id), page=page.page
        ):
            return await paginate_comments(
                self.comment_repository,
                visible_comments(viewer, author_id=author_id),
                page,
                sort,
            )
