"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from quill.config import (
    AuthSettings,
    ListingSettings,
    PasswordSettings,
    ReadingSettings,
    Settings,
)
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    The Settings object is handed to the container as context by whoever
    builds it, so the app and the container always share one instance.
    Each settings section is also provided on its own so services depend only
    on the section they read.
    """

    scope = Scope.APP

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_password_settings(self, settings: Settings) -> PasswordSettings:
        return settings.passwords

    @provide
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        return settings.listing

    @provide
    def provide_reading_settings(self, settings: Settings) -> ReadingSettings:
        return settings.reading
