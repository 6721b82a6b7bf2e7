"""
Redirect endpoints.

``GET /`` serves the welcome page; ``GET /{parameter}`` redirects to the URI
the parameter resolves to, or serves the error page.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from loguru import logger

from urshort.services.mapping import (
    InvalidTargetError,
    MappingNotFoundError,
    MappingResolver,
)
from urshort.web.pages import Pages

router = APIRouter(tags=["redirect"])


def get_resolver(request: Request) -> MappingResolver:
    """
    Get the resolver built for this application.

    :param request: current request.
    :return: the application's resolver.
    """
    return request.app.state.resolver


def get_pages(request: Request) -> Pages:
    """
    Get the HTML pages loaded for this application.

    :param request: current request.
    :return: welcome and error pages.
    """
    return request.app.state.pages


@router.get("/", response_class=HTMLResponse, summary="Welcome page")
async def get_root(pages: Pages = Depends(get_pages)) -> HTMLResponse:
    """
    Return the welcome page, indicating the service is running.

    :param pages: loaded HTML pages.
    :return: the welcome page.
    """
    return HTMLResponse(content=pages.welcome)


@router.get(
    "/{parameter}",
    response_class=RedirectResponse,
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    summary="Redirect to the mapped URI",
    responses={status.HTTP_404_NOT_FOUND: {"content": {"text/html": {}}}},
)
async def get_match_and_redirect(
    parameter: str,
    resolver: MappingResolver = Depends(get_resolver),
    pages: Pages = Depends(get_pages),
) -> Response:
    """
    Redirect to the URI the parameter resolves to.

    Exact entries win over pattern rules. When nothing matches, or the
    matching pattern does not produce a valid URI, the error page is served.

    :param parameter: the requested path segment.
    :param resolver: the application's resolver.
    :param pages: loaded HTML pages.
    :return: a temporary redirect, or the error page with status 404.
    """
    try:
        target = resolver.resolve_any(parameter)
    except MappingNotFoundError:
        logger.info(f"No mapping for {parameter!r}")
        return HTMLResponse(content=pages.error, status_code=status.HTTP_404_NOT_FOUND)
    except InvalidTargetError as e:
        logger.warning(f"Pattern produced invalid URI for {parameter!r}: {e.target!r}")
        return HTMLResponse(content=pages.error, status_code=status.HTTP_404_NOT_FOUND)

    logger.debug(f"Redirecting {parameter!r} -> {target}")
    return RedirectResponse(url=str(target), status_code=status.HTTP_307_TEMPORARY_REDIRECT)
