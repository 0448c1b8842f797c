from __future__ import annotations

from typing import Final

from fastapi import Request

HX_REQUEST_HEADER: Final[str] = "HX-Request"
HX_BOOSTED_HEADER: Final[str] = "HX-Boosted"


def is_htmx_request(request: Request) -> bool:
    """True when htmx issued the request and expects a fragment back."""

    return request.headers.get(HX_REQUEST_HEADER) is not None


def is_boosted(request: Request) -> bool:
    return request.headers.get(HX_BOOSTED_HEADER) is not None


async def htmx_request(request: Request) -> bool:
    """Dependency: page-vs-fragment switch shared by every UI handler."""

    return is_htmx_request(request)
