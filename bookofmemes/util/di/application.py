"""Application layer DI providers."""

from dishka import Scope, provide

from bookofmemes.application.usecase.bookmark import (
    AddBookmarkUseCase,
    ListBookmarksUseCase,
    ListBookmarkUsersUseCase,
    RemoveBookmarkUseCase,
)
from bookofmemes.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
)
from bookofmemes.application.usecase.feed import (
    GetCombinedFeedUseCase,
    GetCommentHistoryUseCase,
    GetFeedPostUseCase,
    GetMentionsUseCase,
    GetRecentActivityUseCase,
    GetUserFeedUseCase,
)
from bookofmemes.application.usecase.follow import (
    FollowUserUseCase,
    GetFollowStatusUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    UnfollowUserUseCase,
)
from bookofmemes.application.usecase.interaction import (
    GetInteractionCountsUseCase,
    ListInteractionsUseCase,
    ListInteractionUsersUseCase,
    RecordInteractionUseCase,
    RemoveInteractionUseCase,
)
from bookofmemes.application.usecase.story import (
    GetStoryChaptersUseCase,
    ListStoriesUseCase,
)
from bookofmemes.application.usecase.user import (
    GetPostsCountUseCase,
    GetProfileUseCase,
    GetUserContentUseCase,
    GetUserSummaryUseCase,
)
from bookofmemes.application.usecase.vote import CastVoteUseCase, RemoveVoteUseCase
from bookofmemes.application.usecase.wallet import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
)
from bookofmemes.domain.service import (
    BookmarkService,
    CommentService,
    ContentService,
    FeedService,
    FollowService,
    InteractionService,
    JWTService,
    UserService,
    VoteService,
    WalletTransactionService,
)
from bookofmemes.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, jwt_service: JWTService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, jwt_service=jwt_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(self, vote_service: VoteService) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service)

    # Feed use cases
    @provide(scope=Scope.REQUEST)
    def get_user_feed_use_case(self, feed_service: FeedService) -> GetUserFeedUseCase:
        """Provide get user feed use case."""
        return GetUserFeedUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_mentions_use_case(self, feed_service: FeedService) -> GetMentionsUseCase:
        """Provide get mentions use case."""
        return GetMentionsUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_recent_activity_use_case(
        self, feed_service: FeedService
    ) -> GetRecentActivityUseCase:
        """Provide get recent activity use case."""
        return GetRecentActivityUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_comment_history_use_case(
        self, feed_service: FeedService
    ) -> GetCommentHistoryUseCase:
        """Provide get comment history use case."""
        return GetCommentHistoryUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_feed_post_use_case(self, feed_service: FeedService) -> GetFeedPostUseCase:
        """Provide get feed post use case."""
        return GetFeedPostUseCase(feed_service=feed_service)

    @provide(scope=Scope.REQUEST)
    def get_combined_feed_use_case(
        self, feed_service: FeedService
    ) -> GetCombinedFeedUseCase:
        """Provide get combined feed use case."""
        return GetCombinedFeedUseCase(feed_service=feed_service)

    # Interaction use cases
    @provide(scope=Scope.REQUEST)
    def get_list_interactions_use_case(
        self, interaction_service: InteractionService
    ) -> ListInteractionsUseCase:
        """Provide list interactions use case."""
        return ListInteractionsUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_record_interaction_use_case(
        self, interaction_service: InteractionService
    ) -> RecordInteractionUseCase:
        """Provide record interaction use case."""
        return RecordInteractionUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_interaction_use_case(
        self, interaction_service: InteractionService
    ) -> RemoveInteractionUseCase:
        """Provide remove interaction use case."""
        return RemoveInteractionUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_interaction_counts_use_case(
        self, interaction_service: InteractionService
    ) -> GetInteractionCountsUseCase:
        """Provide get interaction counts use case."""
        return GetInteractionCountsUseCase(interaction_service=interaction_service)

    @provide(scope=Scope.REQUEST)
    def get_list_interaction_users_use_case(
        self, interaction_service: InteractionService
    ) -> ListInteractionUsersUseCase:
        """Provide list interaction users use case."""
        return ListInteractionUsersUseCase(interaction_service=interaction_service)

    # Bookmark use cases
    @provide(scope=Scope.REQUEST)
    def get_list_bookmarks_use_case(
        self, bookmark_service: BookmarkService
    ) -> ListBookmarksUseCase:
        """Provide list bookmarks use case."""
        return ListBookmarksUseCase(bookmark_service=bookmark_service)

    @provide(scope=Scope.REQUEST)
    def get_add_bookmark_use_case(
        self, bookmark_service: BookmarkService
    ) -> AddBookmarkUseCase:
        """Provide add bookmark use case."""
        return AddBookmarkUseCase(bookmark_service=bookmark_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_bookmark_use_case(
        self, bookmark_service: BookmarkService
    ) -> RemoveBookmarkUseCase:
        """Provide remove bookmark use case."""
        return RemoveBookmarkUseCase(bookmark_service=bookmark_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bookmark_users_use_case(
        self, bookmark_service: BookmarkService
    ) -> ListBookmarkUsersUseCase:
        """Provide list bookmark users use case."""
        return ListBookmarkUsersUseCase(bookmark_service=bookmark_service)

    # Follow use cases
    @provide(scope=Scope.REQUEST)
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_unfollow_user_use_case(
        self, follow_service: FollowService
    ) -> UnfollowUserUseCase:
        """Provide unfollow user use case."""
        return UnfollowUserUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_follow_status_use_case(
        self, follow_service: FollowService
    ) -> GetFollowStatusUseCase:
        """Provide get follow status use case."""
        return GetFollowStatusUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_followers_use_case(
        self, follow_service: FollowService
    ) -> ListFollowersUseCase:
        """Provide list followers use case."""
        return ListFollowersUseCase(follow_service=follow_service)

    @provide(scope=Scope.REQUEST)
    def get_list_following_use_case(
        self, follow_service: FollowService
    ) -> ListFollowingUseCase:
        """Provide list following use case."""
        return ListFollowingUseCase(follow_service=follow_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_user_summary_use_case(
        self, user_service: UserService
    ) -> GetUserSummaryUseCase:
        """Provide get user summary use case."""
        return GetUserSummaryUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_posts_count_use_case(
        self, content_service: ContentService
    ) -> GetPostsCountUseCase:
        """Provide get posts count use case."""
        return GetPostsCountUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_user_content_use_case(
        self, content_service: ContentService
    ) -> GetUserContentUseCase:
        """Provide get user content use case."""
        return GetUserContentUseCase(content_service=content_service)

    # Story use cases
    @provide(scope=Scope.REQUEST)
    def get_list_stories_use_case(
        self, content_service: ContentService
    ) -> ListStoriesUseCase:
        """Provide list stories use case."""
        return ListStoriesUseCase(content_service=content_service)

    @provide(scope=Scope.REQUEST)
    def get_story_chapters_use_case(
        self, content_service: ContentService
    ) -> GetStoryChaptersUseCase:
        """Provide get story chapters use case."""
        return GetStoryChaptersUseCase(content_service=content_service)

    # Wallet transaction use cases
    @provide(scope=Scope.REQUEST)
    def get_list_transactions_use_case(
        self, wallet_transaction_service: WalletTransactionService
    ) -> ListTransactionsUseCase:
        """Provide list wallet transactions use case."""
        return ListTransactionsUseCase(
            wallet_transaction_service=wallet_transaction_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_transaction_use_case(
        self, wallet_transaction_service: WalletTransactionService
    ) -> GetTransactionUseCase:
        """Provide get wallet transaction use case."""
        return GetTransactionUseCase(
            wallet_transaction_service=wallet_transaction_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_transaction_use_case(
        self, wallet_transaction_service: WalletTransactionService
    ) -> CreateTransactionUseCase:
        """Provide create wallet transaction use case."""
        return CreateTransactionUseCase(
            wallet_transaction_service=wallet_transaction_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_transaction_use_case(
        self, wallet_transaction_service: WalletTransactionService
    ) -> UpdateTransactionUseCase:
        """Provide update wallet transaction use case."""
        return UpdateTransactionUseCase(
            wallet_transaction_service=wallet_transaction_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_transaction_use_case(
        self, wallet_transaction_service: WalletTransactionService
    ) -> DeleteTransactionUseCase:
        """Provide delete wallet transaction use case."""
        return DeleteTransactionUseCase(
            wallet_transaction_service=wallet_transaction_service
        )
