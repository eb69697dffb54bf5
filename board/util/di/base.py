"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory doubles
Component = Literal["persistence", "notification", "delivery", "video"]


class ProviderBase(Provider):
    """Base for all board providers.

    Attributes:
        __mock_component__: Component a provider family implements, None when
            the provider has no mock counterpart
        __is_mock__: Whether this subclass is the test double
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
