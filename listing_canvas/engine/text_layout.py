"""Text layout — greedy word wrap and character-budget truncation.

Measurement is injected: ``measure(text) -> width_px``. The compositor supplies
font metrics through FontBook.measure(); tests can supply any pure function.
"""

from __future__ import annotations

import enum
import re
from collections.abc import Callable
from dataclasses import dataclass, replace

Measure = Callable[[str], float]

ELLIPSIS = "..."

_SENTENCE_END = ".!?"
# A sentence boundary only wins if it keeps at least this share of the budget
_SENTENCE_MIN_FRACTION = 0.4
_TRAILING_PUNCT = ",;:-–— "
_WHITESPACE = re.compile(r"\s")


class TruncationMode(str, enum.Enum):
    WORD_BOUNDARY = "word_boundary"
    SENTENCE = "sentence"


@dataclass(frozen=True)
class WrappedTextBlock:
    lines: tuple[str, ...]
    text: str  # what is displayed (after truncation)
    full_text: str  # what the caller supplied
    truncated: bool = False

    @property
    def line_count(self) -> int:
        return len(self.lines)


def wrap(
    text: str,
    max_width: float,
    measure: Measure,
    max_lines: int | None = None,
) -> WrappedTextBlock:
    """Greedy word wrap.

    Words are added to the current line while ``measure(line + " " + word)``
    stays within ``max_width``. A word wider than the box gets a line of its own.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if line and measure(candidate) > max_width:
            lines.append(line)
            line = word
        else:
            line = candidate
    if line:
        lines.append(line)

    truncated = False
    if max_lines is not None and len(lines) > max_lines:
        lines = lines[: max(max_lines, 0)]
        truncated = True
        if lines:
            lines[-1] = _ellipsize_line(lines[-1], max_width, measure)

    return WrappedTextBlock(
        lines=tuple(lines),
        text=text,
        full_text=text,
        truncated=truncated,
    )


def _ellipsize_line(line: str, max_width: float, measure: Measure) -> str:
    while " " in line and measure(line + ELLIPSIS) > max_width:
        line = line.rsplit(" ", 1)[0]
    return line.rstrip(_TRAILING_PUNCT) + ELLIPSIS


def truncate(
    text: str,
    max_chars: int,
    mode: TruncationMode = TruncationMode.WORD_BOUNDARY,
) -> str:
    """Fit ``text`` into a character budget.

    WORD_BOUNDARY: cut at ``max_chars``, back up to the last whitespace and
    append an ellipsis.

    SENTENCE: cut at ``max_chars`` and end on the last complete sentence if it
    keeps at least 40% of the budget (no ellipsis). Otherwise cut at a word
    boundary, drop dangling punctuation and close with a period.
    """
    text = (text or "").strip()
    if max_chars <= 0:
        return ""
    if len(text) <= max_chars:
        return text

    if TruncationMode(mode) is TruncationMode.SENTENCE:
        return _truncate_sentence(text, max_chars)
    return _cut_at_word(text, max_chars) + ELLIPSIS


def _cut_at_word(text: str, max_chars: int) -> str:
    head = text[:max_chars]
    if not text[max_chars].isspace():
        boundaries = [m.start() for m in _WHITESPACE.finditer(head)]
        if boundaries and boundaries[-1] > 0:
            head = head[: boundaries[-1]]
    return head.rstrip()


def _truncate_sentence(text: str, max_chars: int) -> str:
    head = text[:max_chars]
    for end in range(len(head) - 1, -1, -1):
        if head[end] not in _SENTENCE_END:
            continue
        # "3.5 baths" is not a sentence end
        follows = text[end + 1] if end + 1 < len(text) else " "
        if not follows.isspace():
            continue
        if end >= max_chars * _SENTENCE_MIN_FRACTION:
            return head[: end + 1]
        break

    cut = _cut_at_word(text, max_chars).rstrip(_TRAILING_PUNCT)
    if not cut:
        return ""
    return cut if cut[-1] in _SENTENCE_END else cut + "."


def layout(
    text: str,
    *,
    max_width: float,
    measure: Measure,
    max_chars: int = 0,
    mode: TruncationMode = TruncationMode.WORD_BOUNDARY,
    max_lines: int | None = None,
) -> WrappedTextBlock:
    """Truncate to the character budget (if any), then wrap to the box."""
    original = text or ""
    shown = truncate(original, max_chars, mode) if max_chars else original.strip()
    block = wrap(shown, max_width, measure, max_lines=max_lines)
    return replace(
        block,
        full_text=original,
        truncated=block.truncated or shown != original.strip(),
    )
