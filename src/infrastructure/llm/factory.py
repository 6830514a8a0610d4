"""
Selects the ILanguageModel adapter named by the application configuration.
"""

from src.domain.ports.llm_port import ILanguageModel
from src.infrastructure.config import AppConfig

SUPPORTED_PROVIDERS = ("openai", "bedrock")


def create_language_model(config: AppConfig) -> ILanguageModel:
    if config.llm_provider == "openai":
        from src.infrastructure.llm.openai_adapter import OpenAIChatAdapter

        return OpenAIChatAdapter(api_key=config.openai_api_key, model_name=config.llm_model)
    if config.llm_provider == "bedrock":
        from src.infrastructure.llm.bedrock_adapter import BedrockChatAdapter

        return BedrockChatAdapter(model_id=config.llm_model)
    raise ValueError(
        f"Unsupported LLM_PROVIDER {config.llm_provider!r}; "
        f"expected one of {', '.join(SUPPORTED_PROVIDERS)}"
    )
