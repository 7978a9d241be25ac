import logging

from fastapi import FastAPI, Request, Response

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    """A referenced record does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} {key!r} not found")
        self.entity = entity
        self.key = key


async def _not_found_handler(request: Request, exc: Exception) -> Response:
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return Response(status_code=404)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(NotFoundError, _not_found_handler)
