"""JSON error responses for the run history API.

Every error body has the shape ``{"error": message, "code": CODE}`` with
an optional ``details`` member:

- ``INVALID_PARAMETER`` (400): ``details`` lists the unknown query
  parameters, sorted.
- ``NOT_FOUND`` (404): ``details.navigation`` lists the runs that do
  exist, so a client can still offer a choice.
- ``INTERNAL_ERROR`` (500): no details; the cause is in the server log.
"""

from __future__ import annotations

from typing import Any

from aiohttp import web

from snapraid_web.history import HistoryError, RunNotFoundError

NOT_FOUND = "NOT_FOUND"
INVALID_PARAMETER = "INVALID_PARAMETER"
INTERNAL_ERROR = "INTERNAL_ERROR"


def api_error(
    message: str,
    *,
    code: str,
    status: int = 400,
    details: Any = None,
) -> web.Response:
    """Create a JSON error response with the body described above."""
    body: dict[str, Any] = {"error": message, "code": code}
    if details is not None:
        body["details"] = details
    return web.json_response(body, status=status)


def unknown_params_error(
    request: web.Request, allowed: frozenset[str]
) -> web.Response | None:
    """Return a 400 response if the request has query parameters outside ``allowed``."""
    unknown = sorted(set(request.query.keys()) - allowed)
    if not unknown:
        return None
    return api_error(
        "Unknown query parameters", code=INVALID_PARAMETER, details=unknown
    )


def history_error_response(error: HistoryError) -> web.Response:
    """Map a history failure to its API response.

    A missing run is a 404 carrying the navigation list the resolver
    computed. Anything else is a 500 with a generic message.
    """
    if isinstance(error, RunNotFoundError):
        return api_error(
            str(error),
            code=NOT_FOUND,
            status=404,
            details={"navigation": list(error.navigation or [])},
        )
    return api_error("internal error", code=INTERNAL_ERROR, status=500)
