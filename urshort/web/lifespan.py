"""Application lifespan: startup report of the loaded mappings."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from loguru import logger

from urshort.services.mapping import MappingResolver


def log_loaded_mappings(resolver: MappingResolver) -> None:
    """
    Log every standard and pattern mapping the resolver serves.

    :param resolver: the application's resolver.
    """
    logger.info(f"Loaded Standard URIs: {len(resolver.standard)}")
    for key, uri in resolver.standard.items():
        logger.info(f"{key} {uri}")

    logger.info(f"Loaded Pattern URIs: {len(resolver.pattern)}")
    for rule in resolver.pattern:
        logger.info(str(rule))


@asynccontextmanager
async def lifespan_setup(
    app: FastAPI,
) -> AsyncGenerator[None, None]:  # pragma: no cover
    """
    Actions to run on application startup.

    The resolver is already built by the application factory;
    this only reports what it serves.

    :param app: the fastAPI application.
    :return: function that actually performs actions.
    """
    log_loaded_mappings(app.state.resolver)

    yield
