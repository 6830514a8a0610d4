"""
Port (interface) for language model providers.
Infrastructure adapters (e.g. OpenAIChatAdapter, BedrockChatAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ILanguageModel(ABC):
    @abstractmethod
    async def ainvoke(self, messages: list[Any]) -> Any:
        """Invoke the model and return its response message."""
        ...

    @abstractmethod
    def bind_tools(self, tools: list, tool_choice: Optional[str] = None) -> "ILanguageModel":
        """Return a new model instance with the given tools bound for function-calling."""
        ...
