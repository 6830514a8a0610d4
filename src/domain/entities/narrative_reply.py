"""
Domain entity for the final text sent back to the user.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NarrativeReply:
    technical: str
    fundamentals: str

    @property
    def text(self) -> str:
        return f"{self.technical}\n{self.fundamentals}"
