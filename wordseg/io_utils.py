"""Provides utility functions for loading dictionaries and saving results.

Frequency dictionaries are plain text files with one entry per line, the word
and its corpus count separated by whitespace (e.g. `the 23135851162`). The
loader tolerates malformed lines by skipping them, and merges into whatever the
model already holds, so several dictionary files can be layered. Segmentation
results are written as JSON under a "results" key.
"""
import json
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence, Union
from .frequency_model import FrequencyModel
from .types import SegmentationResult

PathLike = Union[str, Path]

def parse_dictionary_lines(
    lines: Iterable[str],
    model: FrequencyModel,
    term_index: int = 0,
    count_index: int = 1,
) -> int:
    """
    Applies word/count pairs from `lines` to `model`.

    Each line is split on whitespace. Lines with fewer than two fields, lines
    that are too short for the requested columns, and lines whose count is not
    a non-negative integer are skipped silently.

    Args:
        lines: An iterable of text lines.
        model: The `FrequencyModel` to upsert entries into.
        term_index: The column holding the word.
        count_index: The column holding the frequency count.

    Returns:
        The number of entries applied to the model.
    """
    if term_index < 0 or count_index < 0:
        raise ValueError("term_index and count_index must be non-negative")

    applied = 0
    for line in lines:
        parts = line.split()
        if len(parts) < 2 or max(term_index, count_index) >= len(parts):
            continue
        try:
            count = int(parts[count_index])
        except ValueError:
            continue
        if count < 0:
            continue
        model.upsert(parts[term_index], count)
        applied += 1
    return applied

def _decoded_lines(raw_lines: Iterable[bytes]) -> Iterator[str]:
    """Yields each line decoded as UTF-8, dropping lines that do not decode."""
    for raw in raw_lines:
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            continue

def load_dictionary(
    path: PathLike,
    model: FrequencyModel,
    term_index: int = 0,
    count_index: int = 1,
) -> bool:
    """
    Loads a frequency dictionary file into `model`.

    The file is streamed line by line. Entries are merged with the data the
    model already holds; a word present in several files keeps the count from
    the file loaded last. Lines that are not valid UTF-8 are skipped like any
    other malformed line.

    Args:
        path: The path to the dictionary file.
        model: The `FrequencyModel` to fill.
        term_index: The column holding the word.
        count_index: The column holding the frequency count.

    Returns:
        True if the file was loaded, False if it does not exist or cannot be read.
    """
    p = Path(path)
    if not p.is_file():
        return False

    try:
        with open(p, "rb") as f:
            applied = parse_dictionary_lines(_decoded_lines(f), model, term_index=term_index, count_index=count_index)
    except OSError as e:
        print(f"Warning: Could not read dictionary file {p}: {e}")
        return False
    print(f"Loaded {applied} dictionary entries from {p.name} (max word length {model.max_word_length}).")
    return True

def save_results(path: PathLike, inputs: Sequence[str], results: Sequence[SegmentationResult]) -> None:
    """
    Saves segmentation results to a JSON file.

    The root of the JSON is a dictionary with a single key, "results", holding
    one object per input with its `input`, `segmented_text` and `score`.

    Raises:
        ValueError: If `inputs` and `results` differ in length.
    """
    if len(inputs) != len(results):
        raise ValueError("inputs and results must have the same length")

    items: List[dict] = [{"input": text, **result.to_dict()} for text, result in zip(inputs, results)]
    data = {"results": items}

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
