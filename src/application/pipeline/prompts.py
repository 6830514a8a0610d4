"""
Prompts and the function schema sent to the language model.
Keeping the prompt text in the application layer keeps it close to the business
rules it encodes, while remaining independent from any infrastructure SDK.
"""

import json
from typing import Optional

from src.domain.entities.market_data import FundamentalsSnapshot, PricePoint

DEFAULT_ASSISTANT_PERSONA = "股市AI助手"

STOCK_LOOKUP_FUNCTION_NAME = "Get_stock_name_and_code"

STOCK_LOOKUP_FUNCTION = {
    "name": STOCK_LOOKUP_FUNCTION_NAME,
    "description": "根據對話取得對應的股市名字和代碼",
    "parameters": {
        "type": "object",
        "properties": {
            "market_code": {
                "type": "string",
                "description": "股市代碼 ,如 2330.TW ",
            },
            "market_name": {
                "type": "string",
                "description": "股市名字 ,如 TSMC",
            },
        },
        "required": ["market_code", "market_name"],
    },
}

TECHNICAL_ANALYST_PERSONA = "K線分析師"
TECHNICAL_ANALYSIS_INSTRUCTION = (
    "這是過去兩個月K線資料以rsi,日均線,MACD和布林線分析,"
    "寫出分析結果以及是否適合購買,如果適合給買入點,不需要解釋技術:"
)

FUNDAMENTALS_ANALYST_PERSONA = "財報分析師"
FUNDAMENTALS_ANALYSIS_INSTRUCTION = "根據財報為該公司寫一段總結並且進行評分,滿分10分: "

# Substituted for a payload the quotes provider failed to return.
DATA_UNAVAILABLE = "資料無法取得 (data unavailable)"

NO_DATA_FOUND_REPLY = "查無此股票資料，請確認股票名稱或代碼。"
NOT_A_STOCK_QUERY_REPLY = "請告訴我想查詢的股票名稱或代碼，例如：台積電 或 2330.TW"


def format_price_history(points: Optional[list[PricePoint]]) -> str:
    if points is None:
        return DATA_UNAVAILABLE
    return json.dumps([p.to_dict() for p in points], ensure_ascii=False, indent=2)


def format_fundamentals(snapshot: Optional[FundamentalsSnapshot]) -> str:
    if snapshot is None:
        return DATA_UNAVAILABLE
    return json.dumps(snapshot.to_dict(), ensure_ascii=False, indent=2)
