"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings, ListingSettings, PasswordSettings, ReadingSettings
from quill.domain.repository import PostRepository, UserRepository
from quill.domain.service import AuthService, JWTService, PostQueryService, PostService
from quill.util.di.base import ProviderBase
from quill.util.password import PasswordHasher


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_hasher(self, password_settings: PasswordSettings) -> PasswordHasher:
        """Provide password hasher (shared, stateless)."""
        return PasswordHasher(password_settings)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        password_hasher: PasswordHasher,
        password_settings: PasswordSettings,
    ) -> AuthService:
        """Provide email/password authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            password_hasher=password_hasher,
            password_settings=password_settings,
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, reading_settings: ReadingSettings
    ) -> PostService:
        """Provide post lifecycle domain service."""
        return PostService(
            post_repository=post_repository, reading_settings=reading_settings
        )

    @provide
    def get_post_query_service(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        listing_settings: ListingSettings,
    ) -> PostQueryService:
        """Provide post query domain service."""
        return PostQueryService(
            post_repository=post_repository,
            user_repository=user_repository,
            listing_settings=listing_settings,
        )
