"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from bookofmemes.util.di import PROVIDERS, Component


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that uses test doubles for mockable components.

    Args:
        unmock: Components to resolve to their production implementation

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Everything in memory
        container = build_test_container()

        # Against a real database (needs DATABASE__URL)
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    known = {base.__mock_component__ for base in PROVIDERS if base.is_mockable()}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        base.implementation(use_mock=base.__mock_component__ not in unmock)()
        if base.is_mockable()
        else base()
        for base in PROVIDERS
    ]
    return make_async_container(*providers)
