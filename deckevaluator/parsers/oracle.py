"""
Oracle text tokenizer.

Splits rules text into literal text runs and braced symbols so that the
symbols ({T}, {W/U}, {2}) can be rendered or matched on their own.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

SYMBOL_PATTERN = re.compile(r"\{([^}]+)\}")


@dataclass(frozen=True, slots=True)
class OracleToken:
    """A literal text run, or a symbol with its braces removed."""

    type: Literal["text", "symbol"]
    value: str

    def render(self) -> str:
        """Token as it appeared in the source text."""
        return f"{{{self.value}}}" if self.type == "symbol" else self.value


def parse_oracle_text(text: str | None) -> Iterator[OracleToken]:
    """
    Tokenize oracle text.

    Args:
        text: Rules text, may span several lines

    Yields:
        OracleToken objects in order. Nothing for empty input. Adjacent
        symbols yield adjacent symbol tokens with no empty text between.

    Example:
        "{T}: Add {G}." -> symbol "T", text ": Add ", symbol "G", text "."
    """
    if not text:
        return

    last_index = 0
    for match in SYMBOL_PATTERN.finditer(text):
        if match.start() > last_index:
            yield OracleToken("text", text[last_index : match.start()])
        yield OracleToken("symbol", match.group(1))
        last_index = match.end()

    if last_index < len(text):
        yield OracleToken("text", text[last_index:])
