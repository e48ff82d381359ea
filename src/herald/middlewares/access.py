import time
import uuid

from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from herald.logger import Logger


class AccessLogMiddleware:
    """
    Logs the lifecycle of every HTTP request through a herald logger.

    Unhandled exceptions are logged at ``error`` and answered with a plain
    500 response when nothing has been sent yet.
    """

    def __init__(self, app: ASGIApp, logger: Logger) -> None:
        self.app = app
        self.logger = logger

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        trace_id = uuid.uuid4().hex
        start_ns = time.perf_counter_ns()
        log = self.logger

        log.info(Request(scope), "request start")

        response_started = False

        async def _send(message: Message) -> None:
            nonlocal response_started

            if message["type"] == "http.response.start":
                response_started = True
                message["headers"] = [
                    *message.get("headers", []),
                    (b"x-request-id", trace_id.encode("latin-1")),
                ]
                log.info(
                    {"statusCode": message["status"], "trace_id": trace_id},
                    "response start",
                )

            await send(message)

        try:
            await self.app(scope, receive, _send)

        except Exception as exc:
            log.error(exc, "request error")

            if not response_started:
                response = PlainTextResponse("Internal Server Error", status_code=500)
                await response(scope, receive, _send)

        log.info(
            {
                "trace_id": trace_id,
                "duration_ms": (time.perf_counter_ns() - start_ns) / 1_000_000,
            },
            "request end",
        )
