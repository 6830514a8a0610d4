"""
Infrastructure adapter: OpenAI chat completions (ChatOpenAI) → ILanguageModel.

All ChatOpenAI / langchain_openai details are confined here, mirroring
BedrockChatAdapter so either provider can back the pipeline.
"""

from typing import Any, Optional

from langchain_openai import ChatOpenAI

from src.domain.ports.llm_port import ILanguageModel


class OpenAIChatAdapter(ILanguageModel):
    """Wraps ChatOpenAI and exposes the ILanguageModel interface."""

    MODEL_NAME = "gpt-4o"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        _runnable: Any = None,
    ) -> None:
        if _runnable is not None:
            self._llm = _runnable
        else:
            self._llm = ChatOpenAI(
                model=model_name or self.MODEL_NAME,
                api_key=api_key,
            )

    async def ainvoke(self, messages: list[Any]) -> Any:
        return await self._llm.ainvoke(messages)

    def bind_tools(self, tools: list, tool_choice: Optional[str] = None) -> "OpenAIChatAdapter":
        """Return a new adapter that has the given tools bound for function-calling."""
        kwargs = {"tool_choice": tool_choice} if tool_choice else {}
        return OpenAIChatAdapter(_runnable=self._llm.bind_tools(tools, **kwargs))
