from __future__ import annotations

"""Split command arguments into a preamble and prefixed values.

A command such as ``1 n/John Tan s/A0123456X`` is broken into the preamble
``"1"`` and the mapping ``{"n/": ["John Tan "], "s/": ["A0123456X"]}``. A prefix
only counts when it sits at the start of the string or right after
whitespace; anything else that merely looks like a prefix is kept as text.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import DuplicatePrefixError
from .schema import duplicate_prefixes_message


class ArgumentMultimap:
    """Prefix -> ordered raw values, plus the text preceding the first prefix."""

    def __init__(self) -> None:
        self._values: Dict[str, List[str]] = {}
        self._preamble = ""

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def set_preamble(self, preamble: str) -> None:
        self._preamble = preamble

    def get_preamble(self) -> str:
        return self._preamble

    def get_value(self, prefix: str) -> Optional[str]:
        """Return the last value supplied for *prefix*, or None."""

        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))

    def is_present(self, prefix: str) -> bool:
        return bool(self._values.get(prefix))

    def present_prefixes(self) -> List[str]:
        return [prefix for prefix, values in self._values.items() if values]

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Raise if any of *prefixes* was given more than once.

        Offenders are reported in the order of *prefixes*, not input order.
        """

        duplicated = [prefix for prefix in prefixes if len(self._values.get(prefix, [])) > 1]
        if duplicated:
            raise DuplicatePrefixError(duplicated, duplicate_prefixes_message(*duplicated))


@dataclass(frozen=True)
class _PrefixPosition:
    prefix: str
    start: int


def _find_prefix_positions(args: str, prefix: str) -> List[_PrefixPosition]:
    """Locate every occurrence of *prefix* that follows whitespace or string start."""

    positions: List[_PrefixPosition] = []
    start = 0
    while True:
        index = args.find(prefix, start)
        if index == -1:
            break
        if index == 0 or args[index - 1].isspace():
            positions.append(_PrefixPosition(prefix, index))
        start = index + 1
    return positions


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Tokenize *args* against the recognised *prefixes*."""

    positions: List[_PrefixPosition] = []
    for prefix in dict.fromkeys(prefixes):
        positions.extend(_find_prefix_positions(args, prefix))
    positions.sort(key=lambda position: position.start)

    multimap = ArgumentMultimap()
    first_start = positions[0].start if positions else len(args)
    multimap.set_preamble(args[:first_start].strip())

    # Values stay untrimmed; field validators trim them.
    for index, position in enumerate(positions):
        end = positions[index + 1].start if index + 1 < len(positions) else len(args)
        multimap.put(position.prefix, args[position.start + len(position.prefix):end])
    return multimap


__all__ = ["ArgumentMultimap", "tokenize"]
