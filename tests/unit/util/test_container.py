"""Unit tests for provider selection and container wiring."""

import pytest

from remarks.adapter.ratelimit import InMemoryRateLimiter
from remarks.application.usecase.comment import (
    DeleteCommentUseCase,
    SubmitCommentUseCase,
)
from remarks.domain.repository import TransactionManager
from remarks.domain.service import RateLimiter
from remarks.persistence.repository.inmemory import InMemoryTransactionManager
from remarks.util.di import (
    NotificationProvider,
    PersistenceProvider,
    ProdPersistenceProvider,
    get_provider,
)
from remarks.util.di.container import create_container
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    def test_concrete_provider_used_as_is(self):
        assert get_provider(NotificationProvider) is NotificationProvider

    def test_selects_production_or_mock(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider
        assert (
            get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider
        )

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError):
            build_test_container(unmock={"search"})


class TestContainer:
    @pytest.mark.asyncio
    async def test_production_container_builds(self):
        # Graph is validated on creation; nothing connects until resolved
        container = create_container()
        await container.close()

    @pytest.mark.asyncio
    async def test_mocked_container_resolves_use_cases(self):
        container = build_test_container()
        async with container() as request:
            assert isinstance(
                await request.get(TransactionManager), InMemoryTransactionManager
            )
            assert isinstance(await request.get(RateLimiter), InMemoryRateLimiter)
            assert await request.get(SubmitCommentUseCase) is not None
            assert await request.get(DeleteCommentUseCase) is not None
        await container.close()
