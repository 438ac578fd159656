"""Test container builder with selective unmocking."""

from typing import Optional

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from quill.config import Settings
from quill.util.di import PROVIDERS, Component, get_provider


def build_test_container(
    unmock: Optional[set[Component]] = None, settings: Optional[Settings] = None
) -> AsyncContainer:
    """Build test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.
        settings: Settings to wire in; test environment defaults when omitted

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are named

    Examples:
        # Unit tests - all mocks
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        use_mock = base.is_mockable() and base.__mock_component__ not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        context={Settings: settings or Settings(environment="test")},
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares."""
    all_components = {
        p.__mock_component__
        for p in PROVIDERS
        if p.is_mockable() and p.__mock_component__
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
