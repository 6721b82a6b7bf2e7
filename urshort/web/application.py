from importlib import metadata
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import UJSONResponse

from urshort.services.mapping import (
    MappingResolver,
    load_environment,
    load_mapping_config,
)
from urshort.settings import Settings, settings
from urshort.web.api.router import api_router
from urshort.web.lifespan import lifespan_setup
from urshort.web.pages import load_pages


def get_app(
    app_settings: Optional[Settings] = None,
    resolver: Optional[MappingResolver] = None,
) -> FastAPI:
    """
    Get FastAPI application.

    This is the main constructor of an application.
    The resolver is built here, before any request can reach it.

    :param app_settings: settings to use, the module settings by default.
    :param resolver: resolver to serve, loaded from the environment by default.
    :return: application.
    """
    if app_settings is None:
        app_settings = settings
    if resolver is None:
        pairs = load_environment(app_settings.env_file)
        resolver = load_mapping_config(pairs, app_settings).build_resolver()

    try:
        version = metadata.version("urshort")
    except metadata.PackageNotFoundError:
        version = "0.1.0"  # Fallback version for development

    app = FastAPI(
        title="urshort",
        version=version,
        lifespan=lifespan_setup,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        default_response_class=UJSONResponse,
    )

    app.state.resolver = resolver
    app.state.pages = load_pages(app_settings)

    app.include_router(router=api_router)

    return app
