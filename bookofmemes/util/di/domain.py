"""Domain layer DI providers."""

from dishka import Scope, provide

from bookofmemes.config import AuthSettings, CommentSettings, FeedSettings
from bookofmemes.domain.repository import RecordStore
from bookofmemes.domain.service import (
    BookmarkService,
    CommentService,
    ContentService,
    FeedService,
    FollowService,
    InteractionService,
    JWTService,
    ProfileService,
    UserService,
    VoteService,
    WalletTransactionService,
)
from bookofmemes.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the record store's
    session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(self, record_store: RecordStore) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(record_store=record_store)

    @provide
    def get_content_service(self, record_store: RecordStore) -> ContentService:
        """Provide content domain service."""
        return ContentService(record_store=record_store)

    @provide
    def get_vote_service(
        self,
        record_store: RecordStore,
        profile_service: ProfileService,
        comment_settings: CommentSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            record_store=record_store,
            profile_service=profile_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_comment_service(
        self,
        record_store: RecordStore,
        profile_service: ProfileService,
        vote_service: VoteService,
        content_service: ContentService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            record_store=record_store,
            profile_service=profile_service,
            vote_service=vote_service,
            content_service=content_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_feed_service(
        self,
        record_store: RecordStore,
        comment_service: CommentService,
        feed_settings: FeedSettings,
    ) -> FeedService:
        """Provide feed domain service."""
        return FeedService(
            record_store=record_store,
            comment_service=comment_service,
            feed_settings=feed_settings,
        )

    @provide
    def get_interaction_service(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> InteractionService:
        """Provide interaction domain service."""
        return InteractionService(
            record_store=record_store, profile_service=profile_service
        )

    @provide
    def get_bookmark_service(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> BookmarkService:
        """Provide bookmark domain service."""
        return BookmarkService(record_store=record_store, profile_service=profile_service)

    @provide
    def get_follow_service(
        self, record_store: RecordStore, profile_service: ProfileService
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(record_store=record_store, profile_service=profile_service)

    @provide
    def get_user_service(
        self,
        profile_service: ProfileService,
        content_service: ContentService,
        follow_service: FollowService,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            profile_service=profile_service,
            content_service=content_service,
            follow_service=follow_service,
        )

    @provide
    def get_wallet_transaction_service(
        self, record_store: RecordStore
    ) -> WalletTransactionService:
        """Provide wallet transaction domain service."""
        return WalletTransactionService(record_store=record_store)
