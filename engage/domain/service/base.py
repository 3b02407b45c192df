"""Base service class for domain services."""

from engage.domain.model import Comment
from engage.domain.repository import CommentFilter, CommentRepository
from engage.domain.value import Actor, CommentSortOrder, Page, PageRequest


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def visible_comments(viewer: Actor | None, **criteria) -> CommentFilter:
    """Build a filter for live comments the viewer is allowed to see.

    Anonymous viewers only see publicly visible comments.
    """
    if viewer is None:
        return CommentFilter(public_only=True, **criteria)
    return CommentFilter(visible_to=viewer, **criteria)


async def paginate_comments(
    comment_repository: CommentRepository,
    criteria: CommentFilter,
    page: PageRequest,
    sort: CommentSortOrder,
) -> Page[Comment]:
    """Run a filtered comment query as one page plus total count."""
    total = await comment_repository.count(criteria)
    items = await comment_repository.find_all(
        criteria, sort=sort, limit=page.size, offset=page.offset
    )
    return Page(items=items, total=total, page=page.page, size=page.size)
