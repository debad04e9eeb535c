"""Input file loader"""

from __future__ import annotations
from pathlib    import Path


def load_text(path: str) -> str:
    """
    Read an input document, normalising CRLF/CR line endings to LF
    (the grammars only treat ' ' and '\\n' as whitespace).
    """
    text = Path(path).read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n")
