"""
Unit tests for ExtractTickerUseCase and the response classifier.
"""

import logging

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

from src.application.pipeline.prompts import (
    DEFAULT_ASSISTANT_PERSONA,
    STOCK_LOOKUP_FUNCTION,
    STOCK_LOOKUP_FUNCTION_NAME,
)
from src.application.use_cases.extract_ticker import ExtractTickerUseCase, classify_response
from src.domain.entities.ticker_extraction import ExtractionStatus
from tests.fakes import FakeLanguageModel, function_call


class TestClassifyResponse:
    def test_valid_function_call(self):
        result = classify_response(function_call("2330.TW", "台積電"))

        assert result.status is ExtractionStatus.VALID
        assert result.symbol == "2330.TW"
        assert result.name == "台積電"
        assert result.is_valid

    def test_symbol_is_stripped_and_uppercased(self):
        result = classify_response(function_call("  aapl "))

        assert result.symbol == "AAPL"

    def test_plain_text_answer_is_no_function_call(self):
        result = classify_response(AIMessage(content="您好，有什麼可以幫忙？"))

        assert result.status is ExtractionStatus.NO_FUNCTION_CALL
        assert result.symbol is None

    def test_literal_undefined_ticker(self):
        result = classify_response(function_call("undefined", "undefined"))

        assert result.status is ExtractionStatus.UNKNOWN_TICKER
        assert result.symbol is None

    @pytest.mark.parametrize("code", [None, "", "   ", 2330])
    def test_missing_or_non_string_code_is_malformed(self, code):
        result = classify_response(function_call(code))

        assert result.status is ExtractionStatus.MALFORMED_ARGUMENTS

    def test_unparsable_arguments_are_malformed(self):
        response = AIMessage(
            content="",
            invalid_tool_calls=[
                {
                    "name": STOCK_LOOKUP_FUNCTION_NAME,
                    "args": '{"market_code": "2330.TW"',
                    "id": "call_1",
                    "error": "Function arguments are not valid JSON",
                }
            ],
        )

        result = classify_response(response)

        assert result.status is ExtractionStatus.MALFORMED_ARGUMENTS
        assert "valid JSON" in result.detail

    def test_unexpected_function_is_malformed(self):
        response = AIMessage(
            content="",
            tool_calls=[{"name": "get_weather", "args": {"city": "Taipei"}, "id": "c"}],
        )

        result = classify_response(response)

        assert result.status is ExtractionStatus.MALFORMED_ARGUMENTS
        assert "get_weather" in result.detail


class TestExtractTickerUseCase:
    def test_binds_single_function_with_auto_choice(self):
        llm = FakeLanguageModel({})

        ExtractTickerUseCase(llm)

        assert llm.bound_tools == [STOCK_LOOKUP_FUNCTION]
        assert llm.tool_choice == "auto"
        parameters = STOCK_LOOKUP_FUNCTION["parameters"]
        assert parameters["required"] == ["market_code", "market_name"]

    @pytest.mark.asyncio
    async def test_sends_persona_and_user_text(self):
        llm = FakeLanguageModel({"測試助手": function_call("2330.TW")})
        use_case = ExtractTickerUseCase(llm, persona="測試助手")

        result = await use_case.execute("台積電股價如何")

        assert result.symbol == "2330.TW"
        [messages] = llm.calls
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "測試助手"
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "台積電股價如何"

    @pytest.mark.asyncio
    async def test_user_text_is_not_logged_at_info(self, caplog):
        llm = FakeLanguageModel({DEFAULT_ASSISTANT_PERSONA: function_call("2330.TW")})
        use_case = ExtractTickerUseCase(llm)

        with caplog.at_level(logging.INFO, logger="src.application.use_cases.extract_ticker"):
            await use_case.execute("我的帳號密碼是 hunter2")

        assert "hunter2" not in caplog.text
        assert "status=valid" in caplog.text

    @pytest.mark.asyncio
    async def test_model_failure_propagates(self):
        llm = FakeLanguageModel({DEFAULT_ASSISTANT_PERSONA: RuntimeError("rate limited")})
        use_case = ExtractTickerUseCase(llm)

        with pytest.raises(RuntimeError, match="rate limited"):
            await use_case.execute("台積電股價如何")
