from __future__ import annotations
import math
from typing import Any, Dict, List
from .types import SegmentationResult

def validate(text: str, result: SegmentationResult) -> Dict[str, Any]:
    """
    Performs sanity checks on a segmentation result against its input.

    This function verifies the invariants every segmentation must satisfy:
    -   No space at the very start or end of the output.
    -   No two spaces next to each other (each boundary is inserted once).
    -   Removing the inserted spaces reproduces the input exactly.
    -   The score is not NaN and not positive, as a sum of log probabilities.
        `-inf` is accepted; it comes from a word with a zero count.

    Args:
        text: The original unspaced input.
        result: The `SegmentationResult` produced for `text`.

    Returns:
        A dictionary summarizing the validation results, containing the total
        `issue_count` and a list of `issues`, where each issue is a
        dictionary detailing the problem.
    """
    issues: List[Dict[str, Any]] = []
    out = result.segmented_text

    if out.startswith(" ") or out.endswith(" "):
        issues.append({
            "type": "edge_boundary_error",
            "message": f"Segmented text {out!r} starts or ends with a space."
        })

    if "  " in out:
        issues.append({
            "type": "double_boundary_error",
            "offset": out.index("  "),
            "message": f"Segmented text {out!r} contains consecutive spaces."
        })

    # Only spaces the segmenter inserted may be removed, so the input's own
    # spaces have to survive the comparison.
    if not _is_spaced_copy(text, out):
        issues.append({
            "type": "round_trip_error",
            "message": f"Segmented text {out!r} does not reproduce the input {text!r}."
        })

    if math.isnan(result.score) or result.score > 0:
        issues.append({
            "type": "score_range_error",
            "score": result.score,
            "message": f"Score {result.score} is not a valid log probability sum."
        })

    return {"issue_count": len(issues), "issues": issues}

def _is_spaced_copy(text: str, out: str) -> bool:
    """True if `out` is `text` with zero or more single characters ' ' inserted."""
    if len(out) < len(text):
        return False
    i = 0
    for ch in out:
        if i < len(text) and ch == text[i]:
            i += 1
        elif ch != " ":
            return False
    return i == len(text)
