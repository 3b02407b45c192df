"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from engage.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    DiscoverCommentsRequest,
    DiscoverCommentsUseCase,
    DiscoveryFacet,
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetThreadResponse,
    GetThreadUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    ListContentCommentsRequest,
    ListContentCommentsUseCase,
    RecountCommentRequest,
    RecountCommentResponse,
    RecountCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from engage.application.usecase.common import (
    CommentItem,
    CommentPageResponse,
    PageParams,
)
from engage.domain.value import CommentSortOrder
from engage.interface.api.routes.actor import ActorHeaders, actor_headers, require_actor

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


def page_query(
    page: int = Query(default=0, ge=0),
    size: int = Query(default=20, ge=1, le=100),
    sort: CommentSortOrder = Query(default=CommentSortOrder.RECENT),
) -> PageParams:
    return PageParams(page=page, size=size, sort=sort)


class CommentAPIFields(BaseModel):
    """Optional comment fields accepted on creation."""

    mentions: list[str] = []
    hashtags: list[str] = []
    media_refs: list[str] = []
    cohort_level: int | None = None
    cultural_tags: list[str] = []
    language_code: str | None = None
    sentiment_score: float | None = None
    is_anonymous: bool = False
    is_private: bool = False


class CreateCommentAPIRequest(CommentAPIFields):
    """API request for creating a comment."""

    text: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateReplyAPIRequest(CommentAPIFields):
    """API request for replying to a comment."""

    text: str


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment. Omitted fields stay unchanged."""

    text: str | None = None
    mentions: list[str] | None = None
    hashtags: list[str] | None = None
    media_refs: list[str] | None = None
    cultural_tags: list[str] | None = None
    language_code: str | None = None
    is_anonymous: bool | None = None
    is_private: bool | None = None
    edit_reason: str | None = None


@router.post(
    "/contents/{content_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    content_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> CommentItem:
    """Comment on a content item, or reply when parent_id is given.

    Args:
        content_id: Content item UUID
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        actor: Caller identity

    Returns:
        Created comment
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            content_id=content_id, **request.model_dump(), **actor.as_actor()
        )
    )


@router.get("/contents/{content_id}/comments", response_model=CommentPageResponse)
async def list_content_comments(
    content_id: str,
    list_use_case: FromDishka[ListContentCommentsUseCase],
    top_level_only: bool = False,
    paging: PageParams = Depends(page_query),
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentPageResponse:
    """List live comments on a content item visible to the caller.

    Args:
        content_id: Content item UUID
        list_use_case: List comments use case from DI
        top_level_only: Only return comments without a parent
        paging: Page, size and sort order
        viewer: Caller identity (optional)

    Returns:
        One page of comments
    """
    return await list_use_case.execute(
        ListContentCommentsRequest(
            content_id=content_id,
            top_level_only=top_level_only,
            **paging.model_dump(),
            **viewer.as_viewer(),
        )
    )


@router.get("/search/comments", response_model=CommentPageResponse)
async def search_comments(
    discover_use_case: FromDishka[DiscoverCommentsUseCase],
    q: str = Query(min_length=1, max_length=200),
    facet: DiscoveryFacet = DiscoveryFacet.TEXT,
    paging: PageParams = Depends(page_query),
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentPageResponse:
    """Find comments by text, hashtag, cultural tag, cohort or author.

    Args:
        discover_use_case: Discovery use case from DI
        q: Query value for the chosen facet
        facet: What to match on (default: text search)
        paging: Page, size and sort order
        viewer: Caller identity (optional)

    Returns:
        One page of matching comments
    """
    return await discover_use_case.execute(
        DiscoverCommentsRequest(
            facet=facet, value=q, **paging.model_dump(), **viewer.as_viewer()
        )
    )


@router.get("/hashtags/{hashtag}/comments", response_model=CommentPageResponse)
async def comments_by_hashtag(
    hashtag: str,
    discover_use_case: FromDishka[DiscoverCommentsUseCase],
    paging: PageParams = Depends(page_query),
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentPageResponse:
    """Comments carrying a hashtag."""
    return await discover_use_case.execute(
        DiscoverCommentsRequest(
            facet=DiscoveryFacet.HASHTAG,
            value=hashtag,
            **paging.model_dump(),
            **viewer.as_viewer(),
        )
    )


@router.get("/actors/{author_id}/comments", response_model=CommentPageResponse)
async def comments_by_author(
    author_id: str,
    discover_use_case: FromDishka[DiscoverCommentsUseCase],
    paging: PageParams = Depends(page_query),
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentPageResponse:
    """Comments written by an actor."""
    return await discover_use_case.execute(
        DiscoverCommentsRequest(
            facet=DiscoveryFacet.AUTHOR,
            value=author_id,
            **paging.model_dump(),
            **viewer.as_viewer(),
        )
    )


@router.get("/comments/{comment_id}", response_model=CommentItem)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentItem:
    """Get a comment by ID. Soft-deleted comments are returned as deleted."""
    return await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id, **viewer.as_viewer())
    )


@router.get("/comments/{comment_id}/thread", response_model=GetThreadResponse)
async def get_thread(
    comment_id: str,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    viewer: ActorHeaders = Depends(actor_headers),
) -> GetThreadResponse:
    """Get a comment with its direct replies, oldest first."""
    return await get_thread_use_case.execute(
        GetCommentRequest(comment_id=comment_id, **viewer.as_viewer())
    )


@router.get("/comments/{comment_id}/replies", response_model=CommentPageResponse)
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
    paging: PageParams = Depends(page_query),
    viewer: ActorHeaders = Depends(actor_headers),
) -> CommentPageResponse:
    """Page through the direct replies of a comment."""
    return await get_replies_use_case.execute(
        GetRepliesRequest(
            comment_id=comment_id, **paging.model_dump(), **viewer.as_viewer()
        )
    )


@router.post(
    "/comments/{comment_id}/replies",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    comment_id: str,
    request: CreateReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> CommentItem:
    """Reply to a comment. The content item is taken from the parent."""
    return await create_reply_use_case.execute(
        CreateReplyRequest(
            parent_id=comment_id, **request.model_dump(), **actor.as_actor()
        )
    )


@router.patch("/comments/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> CommentItem:
    """Edit a comment. Only the author can edit.

    Args:
        comment_id: Comment UUID
        request: Fields to change and an optional edit reason
        update_comment_use_case: Update comment use case from DI
        actor: Caller identity

    Returns:
        Updated comment with its edit history
    """
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, **request.model_dump(), **actor.as_actor()
        )
    )


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> DeleteCommentResponse:
    """Soft-delete a comment. Allowed for the author and for moderators."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, **actor.as_actor())
    )


@router.put("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> LikeCommentResponse:
    """Like a comment. Liking twice is the same as liking once."""
    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id, liked=True, **actor.as_actor())
    )


@router.delete("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def unlike_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> LikeCommentResponse:
    """Remove the caller's like from a comment."""
    return await like_comment_use_case.execute(
        LikeCommentRequest(comment_id=comment_id, liked=False, **actor.as_actor())
    )


@router.post("/comments/{comment_id}/recount", response_model=RecountCommentResponse)
async def recount_comment(
    comment_id: str,
    recount_use_case: FromDishka[RecountCommentUseCase],
    actor: ActorHeaders = Depends(require_actor),
) -> RecountCommentResponse:
    """Repair a comment's reply and like counters. Moderators only."""
    return await recount_use_case.execute(
        RecountCommentRequest(comment_id=comment_id, **actor.as_actor())
    )
