"""
Application configuration read from environment variables.

The entry point calls load_dotenv() (and, when APP_SECRET_ARN is set, the
Secrets Manager bootstrap) before AppConfig.from_env() so values from a
local .env file or the secret are visible here.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = 3000


@dataclass(frozen=True)
class AppConfig:
    channel_access_token: str
    channel_secret: str
    openai_api_key: Optional[str]
    llm_provider: str = "openai"
    llm_model: Optional[str] = None
    assistant_persona: Optional[str] = None
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    langfuse_enabled: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        """Build the configuration from *environ* (defaults to os.environ).

        Raises:
            ValueError: if a required variable is missing or PORT is not an integer.
        """
        env = os.environ if environ is None else environ
        provider = env.get("LLM_PROVIDER", "openai").strip().lower()

        required = ["CHANNEL_ACCESS_TOKEN", "CHANNEL_SECRET"]
        if provider == "openai":
            required.append("OPENAI_API_KEY")
        missing = [name for name in required if not env.get(name)]
        if missing:
            raise ValueError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        raw_port = env.get("PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError as exc:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from exc

        return cls(
            channel_access_token=env["CHANNEL_ACCESS_TOKEN"],
            channel_secret=env["CHANNEL_SECRET"],
            openai_api_key=env.get("OPENAI_API_KEY") or None,
            llm_provider=provider,
            llm_model=env.get("LLM_MODEL") or None,
            assistant_persona=env.get("ASSISTANT_PERSONA") or None,
            port=port,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            langfuse_enabled=bool(
                env.get("LANGFUSE_PUBLIC_KEY") and env.get("LANGFUSE_SECRET_KEY")
            ),
        )

