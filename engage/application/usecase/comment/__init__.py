"""Comment use cases."""

from .comment_statistics import (
    CommentStatisticsRequest,
    CommentStatisticsResponse,
    CommentStatisticsUseCase,
    TrendingHashtagsRequest,
    TrendingHashtagsResponse,
    TrendingHashtagsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .discover_comments import (
    DiscoverCommentsRequest,
    DiscoverCommentsUseCase,
    DiscoveryFacet,
)
from .get_comment import (
    GetCommentRequest,
    GetCommentUseCase,
    GetRepliesRequest,
    GetRepliesUseCase,
    GetThreadResponse,
    GetThreadUseCase,
    ListContentCommentsRequest,
    ListContentCommentsUseCase,
)
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .moderate_comment import (
    FlagCommentRequest,
    FlagCommentUseCase,
    ListPendingRequest,
    ListPendingUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
    ModerationQueueResponse,
)
from .recount_comment import (
    RecountCommentRequest,
    RecountCommentResponse,
    RecountCommentUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentStatisticsRequest",
    "CommentStatisticsResponse",
    "CommentStatisticsUseCase",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "DiscoverCommentsRequest",
    "DiscoverCommentsUseCase",
    "DiscoveryFacet",
    "FlagCommentRequest",
    "FlagCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "GetRepliesRequest",
    "GetRepliesUseCase",
    "GetThreadResponse",
    "GetThreadUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "ListContentCommentsRequest",
    "ListContentCommentsUseCase",
    "ListPendingRequest",
    "ListPendingUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "ModerationQueueResponse",
    "RecountCommentRequest",
    "RecountCommentResponse",
    "RecountCommentUseCase",
    "TrendingHashtagsRequest",
    "TrendingHashtagsResponse",
    "TrendingHashtagsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
