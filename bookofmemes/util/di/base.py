"""Provider metadata for swapping implementations between containers."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """DI provider that may stand for a swappable component.

    A provider class with subclasses is a component: one subclass is the
    production implementation, another (flagged with ``__is_mock__``) the
    test double. A provider without subclasses is used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the production or mock implementation of this component.

        Args:
            use_mock: Select the test double instead of production

        Returns:
            Provider class (not instantiated)

        Raises:
            ValueError: If no subclass of the requested kind is defined
        """
        if not cls.is_mockable():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
