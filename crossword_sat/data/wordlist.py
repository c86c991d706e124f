"""Word list loading and per-slot candidate filtering."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.exceptions import WordListLoadError
from ..core.models import Slot
from ..engine.grid import Grid
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


@dataclass
class WordListConfig:
    """Configuration for word list loading."""

    path: Path | str
    min_length: int = 2
    max_length: Optional[int] = None


class WordList:
    """Ordered, de-duplicated word list with length and positional indexes."""

    def __init__(self, words: Iterable[str]) -> None:
        self._words: List[str] = []
        self._by_length: Dict[int, List[str]] = defaultdict(list)
        # length -> (position, letter) -> words
        self._position_index: Dict[int, Dict[Tuple[int, str], Set[str]]] = defaultdict(
            lambda: defaultdict(set)
        )
        self._seen: Set[str] = set()
        for raw in words:
            word = clean_word(raw)
            if not word or word in self._seen:
                continue
            self._seen.add(word)
            self._words.append(word)
            self._by_length[len(word)].append(word)
            for position, letter in enumerate(word):
                self._position_index[len(word)][(position, letter)].add(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._seen

    def find_candidates(self, length: int, pattern: Optional[Sequence[Optional[str]]] = None) -> List[str]:
        """Return words of ``length`` agreeing with the known letters of ``pattern``."""

        words = self._by_length.get(length, [])
        if not pattern or all(letter is None for letter in pattern):
            return list(words)

        allowed: Optional[Set[str]] = None
        index = self._position_index.get(length, {})
        for position, letter in enumerate(pattern):
            if letter is None:
                continue
            matches = index.get((position, letter), set())
            allowed = set(matches) if allowed is None else allowed & matches
            if not allowed:
                return []
        assert allowed is not None
        return [word for word in words if word in allowed]


def filter_candidates(slot: Slot, grid: Grid, words: Iterable[str]) -> List[str]:
    """Return the words fitting ``slot``, preserving the input order.

    Words are kept when their length equals the slot length and their
    letters match every prefilled cell of the slot. Repeated words are kept
    once. An empty result is a normal outcome.
    """

    word_list = words if isinstance(words, WordList) else WordList(words)
    candidates = word_list.find_candidates(slot.length, pattern=grid.pattern(slot))
    if not candidates:
        LOGGER.warning("No candidate for slot %s (length %d)", slot.id, slot.length)
    return candidates


def load_word_list(config: WordListConfig) -> WordList:
    """Read one word per line, skipping blank lines and ``#`` comments."""

    source = Path(config.path)
    if not source.exists():
        raise WordListLoadError(f"Missing word list: {source}")
    try:
        lines = source.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Cannot read word list {source}: {exc}") from exc

    entries: List[str] = []
    rejected = 0
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        word = clean_word(line)
        if not word:
            rejected += 1
            continue
        if len(word) < config.min_length:
            continue
        if config.max_length is not None and len(word) > config.max_length:
            continue
        entries.append(word)

    word_list = WordList(entries)
    LOGGER.info(
        "Loaded %d words from %s (%d rejected as outside A-Z)",
        len(word_list),
        source,
        rejected,
    )
    return word_list
