"""Retrieval of readings pages: a direct request and a race across routes.

:func:`fetch_direct` is a plain ``requests`` call.  :func:`fetch_via_race`
sends the same URL through several public forwarding proxies at once and
returns the first successful body.  Racing exists for hosts where direct
cross-origin requests are blocked; the service decides when to use it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence
from urllib.parse import quote

import httpx
import requests  # type: ignore[import-untyped]

from .errors import AllRoutesFailedError, HttpError, NetworkError, RaceTimeoutError

logger = logging.getLogger(__name__)

USER_AGENT = "cath-readings/1.0"
DEFAULT_RACE_TIMEOUT = 6.0
STAGGER_SECONDS = 0.15

Route = Callable[[str], str]
Attempt = Callable[[], Awaitable[str]]

ROUTES: Sequence[Route] = (
    lambda u: f"https://cors.isomorphic-git.org/{u}",
    lambda u: f"https://api.allorigins.win/raw?url={quote(u, safe='')}",
    lambda u: f"https://api.codetabs.com/v1/proxy?quest={quote(u, safe='')}",
    lambda u: f"https://thingproxy.freeboard.io/fetch/{u}",
)


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def fetch_direct(url: str, *, timeout: float | tuple[float, float] = (5, 20)) -> str:
    """GET ``url`` and return the body text.

    Raises :class:`HttpError` on a non-2xx status and :class:`NetworkError`
    when the request never completes.
    """

    headers = {"User-Agent": USER_AGENT}
    try:
        resp = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise NetworkError(f"request to {url} failed: {exc}") from exc
    if not _is_success(resp.status_code):
        raise HttpError(resp.status_code, url)
    logger.info("fetched %s directly (%d chars)", url, len(resp.text))
    return resp.text


def build_route_urls(url: str, routes: Sequence[Route] = ROUTES) -> List[str]:
    """Rewrite ``url`` once per route."""

    return [route(url) for route in routes]


async def race(
    attempts: Sequence[Attempt],
    timeout: float,
    *,
    stagger: float = STAGGER_SECONDS,
) -> str:
    """Run ``attempts`` concurrently and return the first successful result.

    Attempt ``i`` starts ``i * stagger`` seconds after the race begins and
    is skipped if the race has already been decided.  One future carries the
    outcome and is resolved at most once, so a failure arriving after the
    winner is ignored.  Every unfinished attempt is cancelled before this
    coroutine returns.

    Raises :class:`AllRoutesFailedError` when every attempt fails and
    :class:`RaceTimeoutError` when ``timeout`` seconds pass first.
    """

    if not attempts:
        raise AllRoutesFailedError([])

    loop = asyncio.get_running_loop()
    outcome: asyncio.Future[str] = loop.create_future()
    errors: List[BaseException] = []
    closing = False

    async def run(index: int, attempt: Attempt) -> None:
        if index and stagger > 0:
            await asyncio.sleep(index * stagger)
        if outcome.done():
            return
        try:
            body = await attempt()
        except asyncio.CancelledError as exc:
            # Only the race itself cancels tasks, and only once it is closing;
            # an attempt that cancels itself has simply failed.
            if closing or outcome.done():
                raise
            failure: BaseException = exc
        except Exception as exc:
            failure = exc
        else:
            if not outcome.done():
                logger.debug("route %d won the race", index)
                outcome.set_result(body)
            return
        errors.append(failure)
        logger.debug("route %d failed: %r", index, failure)
        if len(errors) == len(attempts) and not outcome.done():
            outcome.set_exception(AllRoutesFailedError(errors))

    tasks = [asyncio.ensure_future(run(i, a)) for i, a in enumerate(attempts)]
    try:
        return await asyncio.wait_for(asyncio.shield(outcome), timeout)
    except asyncio.TimeoutError:
        raise RaceTimeoutError(
            f"no route answered within {timeout:g}s"
        ) from None
    finally:
        closing = True
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)


def _route_attempt(client: httpx.AsyncClient, route_url: str) -> Attempt:
    async def attempt() -> str:
        try:
            resp = await client.get(route_url)
        except httpx.HTTPError as exc:
            raise NetworkError(f"request to {route_url} failed: {exc}") from exc
        if not _is_success(resp.status_code):
            raise HttpError(resp.status_code, route_url)
        return resp.text

    return attempt


async def fetch_via_race_async(
    url: str,
    timeout: float = DEFAULT_RACE_TIMEOUT,
    *,
    routes: Sequence[Route] = ROUTES,
    client: Optional[httpx.AsyncClient] = None,
    stagger: float = STAGGER_SECONDS,
) -> str:
    """Fetch ``url`` through every route in ``routes`` and keep the fastest."""

    if client is None:
        async with httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT}, follow_redirects=True
        ) as own_client:
            return await fetch_via_race_async(
                url, timeout, routes=routes, client=own_client, stagger=stagger
            )

    attempts = [_route_attempt(client, u) for u in build_route_urls(url, routes)]
    body = await race(attempts, timeout, stagger=stagger)
    logger.info("fetched %s via route race (%d chars)", url, len(body))
    return body


def fetch_via_race(
    url: str,
    timeout: float = DEFAULT_RACE_TIMEOUT,
    *,
    routes: Sequence[Route] = ROUTES,
    stagger: float = STAGGER_SECONDS,
) -> str:
    """Blocking wrapper around :func:`fetch_via_race_async`."""

    return asyncio.run(fetch_via_race_async(url, timeout, routes=routes, stagger=stagger))


__all__ = [
    "ROUTES",
    "DEFAULT_RACE_TIMEOUT",
    "fetch_direct",
    "build_route_urls",
    "race",
    "fetch_via_race_async",
    "fetch_via_race",
]
