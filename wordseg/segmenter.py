"""Word segmentation by dynamic programming over a triangular window.

The search walks the input left to right. For every start offset it scores
each candidate word that fits inside the window and keeps, per end position,
only the best scoring segmentation reaching it. Because no word is longer
than the window, only the last `window_limit` end positions are ever read
again; they live in a `CompositionWindow` ring buffer, and the chosen spaces
are recorded as bits in a `BoundarySet` rather than as growing strings.
"""
from __future__ import annotations
from typing import Iterable, List, Optional
from tqdm import tqdm

from .data_structures import BoundarySet, Composition, CompositionWindow
from .frequency_model import FrequencyModel
from .types import SegmentationResult

__all__ = ["Segmenter", "segment", "segment_lines"]


def _insert_spaces(text: str, boundaries: BoundarySet) -> str:
    """Rebuilds the output text by placing a space before every boundary offset."""
    parts: List[str] = []
    start = 0
    for offset in boundaries:
        parts.append(text[start:offset])
        start = offset
    parts.append(text[start:])
    return " ".join(parts)


class Segmenter:
    """Finds the most probable split of a string into words.

    A :class:`Segmenter` keeps a reference to the
    :class:`~wordseg.frequency_model.FrequencyModel` and nothing else, so the
    same instance can serve any number of calls, including concurrent ones
    against a frozen model. All working state is allocated inside :meth:`run`.

    Attributes
    ----------
    model:
        The frequency model supplying word log probabilities.
    """
    def __init__(self, model: FrequencyModel):
        self.model = model

    def resolve_window_limit(self, window_limit: Optional[int] = None) -> int:
        """Returns the effective window limit, validating an explicit one.

        ``None`` selects the model's longest word length (or ``1`` for an
        empty model). Anything that is not an integer of at least ``1`` is
        rejected with :class:`ValueError`; limits are never clamped.
        """
        if window_limit is None:
            return max(1, self.model.max_word_length)
        if isinstance(window_limit, bool) or not isinstance(window_limit, int):
            raise ValueError(f"window_limit must be an integer, got {window_limit!r}")
        if window_limit < 1:
            raise ValueError(f"window_limit must be at least 1, got {window_limit}")
        return window_limit

    def run(self, text: str, window_limit: Optional[int] = None) -> SegmentationResult:
        """
        Segments ``text`` into the word sequence with the highest log probability.

        For every start offset ``j`` and part length ``i`` (up to the window
        limit) the part ``text[j:j+i]`` is scored and combined with the best
        segmentation of the prefix ending at ``j``. The end position ``j + i``
        takes the new candidate when it is written for the first time (row
        ``j == 0`` or a full-window part) or when the candidate is strictly
        better; otherwise it keeps what it already holds.

        Args:
            text: The unspaced input string.
            window_limit: Maximum candidate word length. Defaults to the
                          model's longest word length.

        Returns:
            A :class:`SegmentationResult` with the spaced text and its score.

        Raises:
            ValueError: If ``window_limit`` is not an integer >= 1.
        """
        limit = self.resolve_window_limit(window_limit)
        n = len(text)
        if n == 0:
            return SegmentationResult(segmented_text="", score=0.0)

        log_probability = self.model.log_probability
        window = CompositionWindow(size=min(limit, n), capacity=n)
        prefix = Composition.empty(n)

        for j in range(n):
            # Position j shares its slot with j + limit, so read it before row j writes.
            if j > 0:
                prefix.copy_from(window[j])
            boundary = j if j > 0 else None

            for i in range(1, min(n - j, limit) + 1):
                total = prefix.score + log_probability(text[j : j + i])
                cell = window[j + i]
                if j == 0 or i == limit or total > cell.score:
                    cell.extend(prefix, total, boundary)

        best = window[n]
        return SegmentationResult(segmented_text=_insert_spaces(text, best.boundaries), score=best.score)


def segment(text: str, model: FrequencyModel, window_limit: Optional[int] = None) -> SegmentationResult:
    """Segment a single string with a throwaway :class:`Segmenter`."""
    return Segmenter(model).run(text, window_limit)


def segment_lines(
    lines: Iterable[str],
    model: FrequencyModel,
    window_limit: Optional[int] = None,
    *,
    show_progress: bool = False,
) -> List[SegmentationResult]:
    """Segment every line of ``lines``, stripping surrounding whitespace first."""
    segmenter = Segmenter(model)
    # Validate up front so a bad limit fails before the first line is processed.
    limit = segmenter.resolve_window_limit(window_limit)
    results: List[SegmentationResult] = []
    for line in tqdm(lines, desc="Segmenting", unit="line", disable=not show_progress):
        results.append(segmenter.run(line.strip(), limit))
    return results
