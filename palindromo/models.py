from __future__ import annotations

from pydantic import BaseModel


def _single_line(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")


class QueryResult(BaseModel):
    word: str
    is_palindrome: bool

    @property
    def verdict_text(self) -> str:
        return "es" if self.is_palindrome else "NO es"

    def message(self) -> str:
        """Plain-text body returned by /comprobar."""
        return f"La palabra {self.word} {self.verdict_text} un palíndromo"

    def log_line(self) -> str:
        # line breaks inside the word are escaped: one query, one line
        return (
            f'El usuario ha comprobado la palabra "{_single_line(self.word)}" '
            f"y {self.verdict_text} un palíndromo.\n"
        )
