"""
LangGraph factory for the per-event analysis pipeline.

Dependency-injection contract:
  - Receives the step use cases and an IMessagingClient.
  - Never imports langchain_openai, langchain_aws, yfinance, linebot or boto3 directly.
  - langgraph is treated as an orchestration-framework import, acceptable in the
    application layer.

Flow (strictly forward, one early exit):

    extract_ticker ─┬─ valid ───► fetch_market_data ─► generate_narratives ─┐
                    └─ otherwise ► fallback_reply ──────────────────────────┴► send_reply
"""

from langgraph.graph import END, START, StateGraph

from src.application.pipeline.prompts import NO_DATA_FOUND_REPLY, NOT_A_STOCK_QUERY_REPLY
from src.application.pipeline.state import PipelineState
from src.application.use_cases.extract_ticker import ExtractTickerUseCase
from src.application.use_cases.generate_narratives import GenerateNarrativesUseCase
from src.application.use_cases.get_fundamentals import GetFundamentalsUseCase
from src.application.use_cases.get_price_history import GetPriceHistoryUseCase
from src.domain.entities.ticker_extraction import ExtractionStatus
from src.domain.ports.messaging_port import IMessagingClient

ANALYSED = "analysed"

FALLBACK_REPLIES = {
    ExtractionStatus.NO_FUNCTION_CALL: NOT_A_STOCK_QUERY_REPLY,
    ExtractionStatus.MALFORMED_ARGUMENTS: NO_DATA_FOUND_REPLY,
    ExtractionStatus.UNKNOWN_TICKER: NO_DATA_FOUND_REPLY,
}


def build_event_pipeline(
    extract_ticker: ExtractTickerUseCase,
    price_history: GetPriceHistoryUseCase,
    fundamentals: GetFundamentalsUseCase,
    narratives: GenerateNarrativesUseCase,
    messaging: IMessagingClient,
):
    """Build and compile the per-event pipeline graph.

    Returns:
        Compiled LangGraph CompiledStateGraph ready for ainvoke() calls with
        {"text": ..., "reply_token": ...} as input.
    """

    async def extract_ticker_node(state: PipelineState) -> dict:
        return {"extraction": await extract_ticker.execute(state["text"])}

    async def fetch_market_data_node(state: PipelineState) -> dict:
        symbol = state["extraction"].symbol
        history = await price_history.execute(symbol)
        snapshot = await fundamentals.execute(symbol)
        return {"history": history, "fundamentals": snapshot}

    async def generate_narratives_node(state: PipelineState) -> dict:
        reply = await narratives.execute(state["history"], state["fundamentals"])
        return {"reply_text": reply.text, "outcome": ANALYSED}

    async def fallback_reply_node(state: PipelineState) -> dict:
        status = state["extraction"].status
        return {"reply_text": FALLBACK_REPLIES[status], "outcome": status.value}

    async def send_reply_node(state: PipelineState) -> dict:
        await messaging.reply_text(state["reply_token"], state["reply_text"])
        return {}

    def route_extraction(state: PipelineState) -> str:
        if state["extraction"].is_valid:
            return "fetch_market_data"
        return "fallback_reply"

    workflow = StateGraph(PipelineState)
    workflow.add_node("extract_ticker", extract_ticker_node)
    workflow.add_node("fetch_market_data", fetch_market_data_node)
    workflow.add_node("generate_narratives", generate_narratives_node)
    workflow.add_node("fallback_reply", fallback_reply_node)
    workflow.add_node("send_reply", send_reply_node)
    workflow.add_edge(START, "extract_ticker")
    workflow.add_conditional_edges(
        "extract_ticker",
        route_extraction,
        ["fetch_market_data", "fallback_reply"],
    )
    workflow.add_edge("fetch_market_data", "generate_narratives")
    workflow.add_edge("generate_narratives", "send_reply")
    workflow.add_edge("fallback_reply", "send_reply")
    workflow.add_edge("send_reply", END)
    return workflow.compile()
