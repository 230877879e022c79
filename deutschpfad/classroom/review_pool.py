"""
ReviewPool - Leitner-style queue of missed prompts.

Missed steps enter the pool at level 0. Correct typed recall promotes an
entry one level; a correct recall at level 2 removes it as mastered.

The pool is persisted as one string under the `review_pool` key, in the
format written by earlier app versions:

    0:<prompt>||<answer>;;1:<prompt>||<answer>

A literal `|` in prompt or answer is written as `/`. `;;` inside text is not
escaped and splits the entry; such entries are dropped on decode.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from deutschpfad.schemas import MAX_REVIEW_LEVEL, ReviewEntry

from .store import KeyValueStore


logger = logging.getLogger(__name__)

POOL_KEY = "review_pool"
ENTRY_SEP = ";;"
FIELD_SEP = "||"
LEVEL_SEP = ":"


class ReviewOutcome(str, Enum):
    RETRY = "retry"           # wrong answer, entry unchanged
    PROMOTED = "promoted"     # moved up one level
    MASTERED = "mastered"     # removed from the pool


# -----------------------------------------------------------------------------
# Wire format
# -----------------------------------------------------------------------------

def escape(text: str) -> str:
    return text.replace("|", "/")


def encode_entry(entry: ReviewEntry) -> str:
    return f"{entry.level}{LEVEL_SEP}{escape(entry.prompt_native)}{FIELD_SEP}{escape(entry.correct_answer)}"


def parse_segment(segment: str) -> Optional[ReviewEntry]:
    """Parse one `level:prompt||answer` segment; None if malformed."""
    fields = segment.split(FIELD_SEP)
    if len(fields) != 2:
        return None
    level_text, sep, prompt = fields[0].partition(LEVEL_SEP)
    if not sep:
        return None
    try:
        level = int(level_text)
    except ValueError:
        return None
    if not 0 <= level <= MAX_REVIEW_LEVEL:
        return None
    return ReviewEntry(level=level, prompt_native=prompt, correct_answer=fields[1])


def encode_entries(entries: Iterable[ReviewEntry]) -> str:
    return ENTRY_SEP.join(encode_entry(entry) for entry in entries)


def decode_entries(blob: str) -> list[ReviewEntry]:
    """
    Decode a pool blob.

    Malformed segments are skipped. The result is ordered by level; entries
    of equal level keep their stored order.
    """
    if not blob or not blob.strip():
        return []
    entries = []
    for segment in blob.split(ENTRY_SEP):
        entry = parse_segment(segment)
        if entry is None:
            if segment.strip():
                logger.debug(f"Dropping malformed review entry: {segment!r}")
            continue
        entries.append(entry)
    return sorted(entries, key=lambda e: e.level)


# -----------------------------------------------------------------------------
# Pool
# -----------------------------------------------------------------------------

class ReviewPool:
    """
    Review pool stored in a KeyValueStore.

    Duplicates are allowed: a prompt missed twice appears twice.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _raw(self) -> str:
        return self.store.get(POOL_KEY, "") or ""

    def _write(self, segments: list[str]):
        self.store.set(POOL_KEY, ENTRY_SEP.join(s for s in segments if s.strip()))

    def add_miss(self, prompt_native: str, correct_answer: str):
        """Append a new level-0 entry."""
        entry = encode_entry(ReviewEntry(level=0, prompt_native=prompt_native, correct_answer=correct_answer))
        old = self._raw()
        self.store.set(POOL_KEY, entry if not old.strip() else old + ENTRY_SEP + entry)
        logger.debug(f"Review pool: added {prompt_native!r}")

    def decode_all(self) -> list[ReviewEntry]:
        return decode_entries(self._raw())

    def __len__(self) -> int:
        return len(self.decode_all())

    def promote(self, prompt_native: str, correct_answer: str) -> bool:
        """
        Raise the first entry with this prompt by one level (max 2).

        The answer is not part of the match. Returns False, leaving the
        pool untouched, if no entry has the prompt.
        """
        target = escape(prompt_native)
        segments = self._raw().split(ENTRY_SEP)
        for i, segment in enumerate(segments):
            entry = parse_segment(segment)
            if entry is None or entry.prompt_native != target:
                continue
            promoted = entry.model_copy(update={"level": min(entry.level + 1, MAX_REVIEW_LEVEL)})
            segments[i] = encode_entry(promoted)
            self._write(segments)
            logger.debug(f"Review pool: promoted {prompt_native!r} to level {promoted.level}")
            return True
        return False

    def remove(self, prompt_native: str, correct_answer: str) -> int:
        """Delete every entry with this prompt and answer; returns how many."""
        target = (escape(prompt_native), escape(correct_answer))
        segments = self._raw().split(ENTRY_SEP)
        kept = []
        removed = 0
        for segment in segments:
            entry = parse_segment(segment)
            if entry is not None and (entry.prompt_native, entry.correct_answer) == target:
                removed += 1
                continue
            kept.append(segment)
        if removed:
            self._write(kept)
            logger.debug(f"Review pool: removed {removed} x {prompt_native!r}")
        return removed

    def clear(self):
        self.store.remove(POOL_KEY)

    def answer(self, entry: ReviewEntry, typed: str) -> ReviewOutcome:
        """
        Apply one typed-recall attempt for an entry shown in the review list.

        Comparison ignores case and surrounding whitespace.
        """
        if typed.strip().lower() != entry.correct_answer.strip().lower():
            return ReviewOutcome.RETRY
        if entry.mastered_on_next_hit:
            self.remove(entry.prompt_native, entry.correct_answer)
            return ReviewOutcome.MASTERED
        self.promote(entry.prompt_native, entry.correct_answer)
        return ReviewOutcome.PROMOTED
