from __future__ import annotations
from dataclasses import dataclass
from typing import List

__all__ = ["SegmentationResult"]

@dataclass(frozen=True)
class SegmentationResult:
    """
    The outcome of segmenting a single input string.

    Attributes:
        segmented_text: The input with a single space inserted at every chosen
                        word boundary. Never starts or ends with a space.
        score: The sum of the log10 probabilities of the words along the chosen
               segmentation. Less negative is better; an empty input scores 0.
    """
    segmented_text: str
    score: float

    @property
    def words(self) -> List[str]:
        """Returns the segmented words in order, or an empty list for empty input."""
        if not self.segmented_text:
            return []
        return self.segmented_text.split(" ")

    def to_dict(self) -> dict:
        return {"segmented_text": self.segmented_text, "score": self.score}
