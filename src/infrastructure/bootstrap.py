"""
Process start-up steps that must run before AppConfig.from_env().

Order matters: logging is configured first so the secret bootstrap's own log
lines are emitted, and the secret is loaded before anything reads LINE,
OpenAI or LANGFUSE_* variables.
"""

import logging
import os
from typing import Callable, MutableMapping, Optional

from dotenv import load_dotenv

from src.domain.ports.secret_store_port import ISecretStore

LOG_FORMAT = "%(asctime)s — %(name)s — %(levelname)s — %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())


def _default_secret_store() -> ISecretStore:
    from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter
    return SecretsManagerAdapter()


def bootstrap_environment(
    environ: Optional[MutableMapping[str, str]] = None,
    secret_store_factory: Callable[[], ISecretStore] = _default_secret_store,
) -> None:
    """Load .env, configure logging from LOG_LEVEL, then load APP_SECRET_ARN if set."""
    load_dotenv()
    env = os.environ if environ is None else environ
    configure_logging(env.get("LOG_LEVEL", "INFO"))

    secret_arn = env.get("APP_SECRET_ARN")
    if secret_arn:
        secret_store_factory().load_into_env(secret_arn)
