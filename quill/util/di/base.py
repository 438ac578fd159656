"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Optional

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all DI providers with unified metadata.

    A provider that is subclassed is a mockable component: its subclasses are
    the interchangeable production and mock implementations. A provider with
    no subclasses is concrete and used as-is.

    Attributes:
        __mock_component__: Component name used to unmock it in tests
        __is_mock__: Whether this is a mock implementation
    """

    __mock_component__: ClassVar[Optional[Component]] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementations(cls) -> list[type["ProviderBase"]]:
        """Direct subclasses implementing this component."""
        return cls.__subclasses__()

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.implementations())
