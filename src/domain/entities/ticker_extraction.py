"""
Domain entity for the language model's guess at a traded symbol.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ExtractionStatus(str, Enum):
    VALID = "valid"
    NO_FUNCTION_CALL = "no_function_call"
    MALFORMED_ARGUMENTS = "malformed_arguments"
    UNKNOWN_TICKER = "unknown_ticker"


@dataclass(frozen=True)
class TickerExtraction:
    status: ExtractionStatus
    symbol: Optional[str] = None
    name: Optional[str] = None
    detail: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.status is ExtractionStatus.VALID
