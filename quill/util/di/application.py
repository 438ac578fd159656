"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.auth import SigninUseCase, SignupUseCase
from quill.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListMyPostsUseCase,
    ListPostsUseCase,
    UpdatePostStateUseCase,
    UpdatePostUseCase,
)
from quill.domain.service import AuthService, PostQueryService, PostService
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(self, auth_service: AuthService) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(auth_service=auth_service)

    @provide
    def get_signin_use_case(self, auth_service: AuthService) -> SigninUseCase:
        """Provide signin use case."""
        return SigninUseCase(auth_service=auth_service)

    # Post lifecycle use cases
    @provide
    def get_create_post_use_case(self, post_service: PostService) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(self, post_service: PostService) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service)

    @provide
    def get_update_post_state_use_case(
        self, post_service: PostService
    ) -> UpdatePostStateUseCase:
        """Provide update post state use case."""
        return UpdatePostStateUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Post query use cases
    @provide
    def get_get_post_use_case(
        self, post_query_service: PostQueryService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_query_service=post_query_service)

    @provide
    def get_list_posts_use_case(
        self, post_query_service: PostQueryService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_query_service=post_query_service)

    @provide
    def get_list_my_posts_use_case(
        self, post_query_service: PostQueryService
    ) -> ListMyPostsUseCase:
        """Provide list my posts use case."""
        return ListMyPostsUseCase(post_query_service=post_query_service)
