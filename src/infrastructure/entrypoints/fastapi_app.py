"""
FastAPI entry point.

This module is the Composition Root: it loads configuration, wires all
infrastructure adapters once at startup and passes them to the application
layer. Authenticity of each delivery is checked by LineWebhookParser
(IWebhookParser) against the X-Line-Signature header.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 3000
or:
    python -m src.infrastructure.entrypoints.fastapi_app
"""

import logging

from src.infrastructure.bootstrap import bootstrap_environment

# Logging, then secrets: both must precede AppConfig and any LANGFUSE_* reader
bootstrap_environment()

import uvicorn  # noqa: E402

from src.application.pipeline.graph import build_event_pipeline  # noqa: E402
from src.application.pipeline.prompts import DEFAULT_ASSISTANT_PERSONA  # noqa: E402
from src.application.use_cases.extract_ticker import ExtractTickerUseCase  # noqa: E402
from src.application.use_cases.generate_narratives import GenerateNarrativesUseCase  # noqa: E402
from src.application.use_cases.get_fundamentals import GetFundamentalsUseCase  # noqa: E402
from src.application.use_cases.get_price_history import GetPriceHistoryUseCase  # noqa: E402
from src.application.use_cases.handle_message_event import HandleMessageEventUseCase  # noqa: E402
from src.application.use_cases.handle_webhook import HandleWebhookUseCase  # noqa: E402
from src.infrastructure.config import AppConfig  # noqa: E402
from src.infrastructure.entrypoints.webhook_api import create_app  # noqa: E402
from src.infrastructure.llm.factory import create_language_model  # noqa: E402
from src.infrastructure.messaging.line_messaging_client import LineMessagingClient  # noqa: E402
from src.infrastructure.messaging.line_webhook_parser import LineWebhookParser  # noqa: E402
from src.infrastructure.observability.langfuse_adapter import (  # noqa: E402
    LangfuseObservabilityHandler,
    NullObservabilityHandler,
)
from src.infrastructure.stock_data.yfinance_adapter import YFinanceStockDataProvider  # noqa: E402

_config = AppConfig.from_env()
logging.getLogger().setLevel(_config.log_level)

# ---------------------------------------------------------------------------
# Composition Root: wire all dependencies once at startup
# ---------------------------------------------------------------------------
_llm = create_language_model(_config)
_stock_provider = YFinanceStockDataProvider()
_messaging = LineMessagingClient(_config.channel_access_token)
_parser = LineWebhookParser(_config.channel_secret)
_observability = (
    LangfuseObservabilityHandler() if _config.langfuse_enabled else NullObservabilityHandler()
)

_pipeline = build_event_pipeline(
    extract_ticker=ExtractTickerUseCase(
        _llm, persona=_config.assistant_persona or DEFAULT_ASSISTANT_PERSONA
    ),
    price_history=GetPriceHistoryUseCase(_stock_provider),
    fundamentals=GetFundamentalsUseCase(_stock_provider),
    narratives=GenerateNarrativesUseCase(_llm),
    messaging=_messaging,
)
_webhook_use_case = HandleWebhookUseCase(
    HandleMessageEventUseCase(_pipeline, _observability)
)

app = create_app(
    parser=_parser,
    webhook_use_case=_webhook_use_case,
    observability=_observability,
    on_shutdown=_messaging.close,
)


if __name__ == "__main__":
    logging.getLogger(__name__).info("listening on %s", _config.port)
    uvicorn.run(app, host="0.0.0.0", port=_config.port)
