from __future__ import annotations

"""Student roster manager driven by one-line text commands.

The parser layer (`tokenizer`, `parsers`, `fields`) validates commands, the
`model` keeps the roster and its filtered view, and `storage` persists it as
JSON. `cli` provides the terminal command bar.
"""

__all__ = []
