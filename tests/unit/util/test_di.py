"""Unit tests for provider selection."""

import pytest

from meriter.util.di import (
    PROVIDERS,
    EventsProvider,
    PersistenceProvider,
    ProdDomainProvider,
    ProdEventsProvider,
    get_provider,
)
from tests.di import MockEventsProvider, MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_is_used_as_is(self):
        assert get_provider(ProdDomainProvider) is ProdDomainProvider

    def test_mockable_component_selects_by_flag(self):
        assert get_provider(EventsProvider, use_mock=False) is ProdEventsProvider
        assert get_provider(EventsProvider, use_mock=True) is MockEventsProvider
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider

    def test_every_mockable_component_has_a_mock(self):
        for base in PROVIDERS:
            if base.__subclasses__():
                assert get_provider(base, use_mock=True).__is_mock__


class TestBuildTestContainer:
    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"bluesky"})
