"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from bookofmemes.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Build the production container.

    Every component resolves to its production implementation. The
    record store talks to the hosted Postgres configured in ``Settings``.
    """
    providers = [base.implementation(use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the application, replacing any earlier one."""
    setup_dishka(container, app)
