"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from remarks.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Usage:
        container = create_container()
        async with container() as request:
            use_case = await request.get(SubmitCommentUseCase)
            response = await use_case.execute(SubmitCommentRequest(...))
        await container.close()

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
