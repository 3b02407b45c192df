"""Application layer DI providers."""

from dishka import Scope, provide

from engage.application.usecase.comment import (
    CommentStatisticsUseCase,
    CreateCommentUseCase,
    CreateReplyUseCase,
    DeleteCommentUseCase,
    DiscoverCommentsUseCase,
    FlagCommentUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    GetThreadUseCase,
    LikeCommentUseCase,
    ListContentCommentsUseCase,
    ListPendingUseCase,
    ModerateCommentUseCase,
    RecountCommentUseCase,
    TrendingHashtagsUseCase,
    UpdateCommentUseCase,
)
from engage.application.usecase.reaction import (
    GetReactionUseCase,
    GetUserReactionUseCase,
    IntensityAnalysisUseCase,
    ListActorReactionsUseCase,
    ListContentReactionsUseCase,
    ListReactionTypesUseCase,
    ReactionBreakdownUseCase,
    ReactionSummaryUseCase,
    ReactUseCase,
    RemoveContentReactionUseCase,
    RemoveReactionUseCase,
    TrendingReactionsUseCase,
    UpdateReactionUseCase,
)
from engage.domain.service import (
    AggregationService,
    CommentService,
    DiscoveryService,
    ModerationService,
    ReactionService,
)
from engage.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, comment_service: CommentService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, comment_service: CommentService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_content_comments_use_case(
        self, comment_service: CommentService
    ) -> ListContentCommentsUseCase:
        """Provide list content comments use case."""
        return ListContentCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_service: CommentService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_recount_comment_use_case(
        self, comment_service: CommentService
    ) -> RecountCommentUseCase:
        """Provide recount comment use case."""
        return RecountCommentUseCase(comment_service=comment_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_flag_comment_use_case(
        self, moderation_service: ModerationService
    ) -> FlagCommentUseCase:
        """Provide flag comment use case."""
        return FlagCommentUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_use_case(
        self, moderation_service: ModerationService
    ) -> ListPendingUseCase:
        """Provide list pending use case."""
        return ListPendingUseCase(moderation_service=moderation_service)

    # Discovery use cases
    @provide(scope=Scope.REQUEST)
    def get_discover_comments_use_case(
        self, discovery_service: DiscoveryService
    ) -> DiscoverCommentsUseCase:
        """Provide discover comments use case."""
        return DiscoverCommentsUseCase(discovery_service=discovery_service)

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_react_use_case(self, reaction_service: ReactionService) -> ReactUseCase:
        """Provide react use case."""
        return ReactUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_update_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> UpdateReactionUseCase:
        """Provide update reaction use case."""
        return UpdateReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveReactionUseCase:
        """Provide remove reaction use case."""
        return RemoveReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_content_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveContentReactionUseCase:
        """Provide remove content reaction use case."""
        return RemoveContentReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> GetReactionUseCase:
        """Provide get reaction use case."""
        return GetReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_content_reactions_use_case(
        self, reaction_service: ReactionService
    ) -> ListContentReactionsUseCase:
        """Provide list content reactions use case."""
        return ListContentReactionsUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> GetUserReactionUseCase:
        """Provide get user reaction use case."""
        return GetUserReactionUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_actor_reactions_use_case(
        self, reaction_service: ReactionService
    ) -> ListActorReactionsUseCase:
        """Provide list actor reactions use case."""
        return ListActorReactionsUseCase(reaction_service=reaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reaction_types_use_case(
        self, reaction_service: ReactionService
    ) -> ListReactionTypesUseCase:
        """Provide list reaction types use case."""
        return ListReactionTypesUseCase(reaction_service=reaction_service)

    # Statistics use cases
    @provide(scope=Scope.REQUEST)
    def get_trending_hashtags_use_case(
        self, aggregation_service: AggregationService
    ) -> TrendingHashtagsUseCase:
        """Provide trending hashtags use case."""
        return TrendingHashtagsUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_statistics_use_case(
        self, aggregation_service: AggregationService
    ) -> CommentStatisticsUseCase:
        """Provide comment statistics use case."""
        return CommentStatisticsUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_reaction_summary_use_case(
        self, aggregation_service: AggregationService
    ) -> ReactionSummaryUseCase:
        """Provide reaction summary use case."""
        return ReactionSummaryUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_reaction_breakdown_use_case(
        self, aggregation_service: AggregationService
    ) -> ReactionBreakdownUseCase:
        """Provide reaction breakdown use case."""
        return ReactionBreakdownUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_intensity_analysis_use_case(
        self, aggregation_service: AggregationService
    ) -> IntensityAnalysisUseCase:
        """Provide intensity analysis use case."""
        return IntensityAnalysisUseCase(aggregation_service=aggregation_service)

    @provide(scope=Scope.REQUEST)
    def get_trending_reactions_use_case(
        self, aggregation_service: AggregationService
    ) -> TrendingReactionsUseCase:
        """Provide trending reactions use case."""
        return TrendingReactionsUseCase(aggregation_service=aggregation_service)
