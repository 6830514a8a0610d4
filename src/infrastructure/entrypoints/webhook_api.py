"""
FastAPI application factory for the LINE webhook.

create_app() receives fully wired dependencies so tests can build the API
around fakes; fastapi_app.py is the Composition Root that wires the real
adapters.
"""

import logging
from contextlib import asynccontextmanager
from typing import Awaitable, Callable, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from src.application.use_cases.handle_webhook import HandleWebhookUseCase
from src.domain.entities.inbound_event import InboundEvent
from src.domain.ports.observability_port import IObservabilityHandler
from src.domain.ports.webhook_parser_port import IWebhookParser

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Line-Signature"


def create_app(
    parser: IWebhookParser,
    webhook_use_case: HandleWebhookUseCase,
    observability: IObservabilityHandler,
    on_shutdown: Optional[Callable[[], Awaitable[None]]] = None,
) -> FastAPI:
    """Build the FastAPI app exposing POST /callback and GET /health.

    Args:
        parser:           IWebhookParser used to verify and decode each delivery.
        webhook_use_case: HandleWebhookUseCase that runs the events.
        observability:    Flushed when the application shuts down.
        on_shutdown:      Optional coroutine (e.g. closing HTTP clients) run at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        observability.flush()
        if on_shutdown is not None:
            await on_shutdown()

    app = FastAPI(title="LINE Stock Analysis Webhook", lifespan=lifespan)

    async def verified_events(request: Request) -> list[InboundEvent]:
        """Verify the X-Line-Signature header and decode the events."""
        signature = request.headers.get(SIGNATURE_HEADER)
        if not signature:
            raise HTTPException(status_code=400, detail="Invalid signature")
        raw_body = await request.body()
        try:
            return parser.parse(raw_body.decode("utf-8"), signature)
        except ValueError as exc:
            logger.warning("Rejected webhook delivery: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.post("/callback")
    async def callback(request: Request):
        """Handle every event of the delivery; 500 if any handler fails."""
        events = await verified_events(request)
        try:
            results = await webhook_use_case.execute(events)
        except Exception:
            logger.exception("Webhook handling failed for %d event(s)", len(events))
            return Response(status_code=500)
        return JSONResponse(results)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
