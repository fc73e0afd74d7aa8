"""Manages the loading and validation of application configuration.

This module defines the `Config` dataclass, a typed container for the settings
the command line needs to build a frequency model and run the segmenter, and
the `load_config` function that reads them from a `config.yaml` file.
Dictionary paths in the YAML file are resolved relative to the file itself.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import yaml

from .frequency_model import DEFAULT_CORPUS_SIZE

@dataclass
class Config:
    """
    A typed configuration object that holds all settings for the segmenter.

    Attributes:
        corpus_size: Total token count of the corpus behind the dictionaries.
        window_limit: Maximum candidate word length. `None` uses the longest
                      word in the loaded dictionaries.
        term_index: Column of the word in each dictionary line.
        count_index: Column of the frequency count in each dictionary line.
        dictionaries: Paths of the dictionary files to load, in order. Later
                      files override counts from earlier ones.
        show_progress: Show a progress bar while segmenting input files.
    """
    corpus_size: int = DEFAULT_CORPUS_SIZE
    window_limit: Optional[int] = None
    term_index: int = 0
    count_index: int = 1
    dictionaries: tuple[str, ...] = ()
    show_progress: bool = False

    def __post_init__(self) -> None:
        if self.corpus_size <= 0:
            raise ValueError(f"corpus_size must be positive, got {self.corpus_size}")
        if self.window_limit is not None and self.window_limit < 1:
            raise ValueError(f"window_limit must be at least 1, got {self.window_limit}")
        if self.term_index < 0 or self.count_index < 0:
            raise ValueError("term_index and count_index must be non-negative")

def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates the YAML configuration file into a `Config` object.

    Keys absent from the file fall back to the dataclass defaults. An empty
    file yields a default configuration.

    Args:
        path: The path to the `config.yaml` file.

    Returns:
        A fully populated and validated `Config` object.

    Raises:
        FileNotFoundError: If the specified `config.yaml` file cannot be found.
        ValueError: If the YAML cannot be parsed or a value is out of range.
        TypeError: If the root of the YAML file is not a dictionary.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    dictionary_section = y.get("dictionary", {}) or {}
    if not isinstance(dictionary_section, dict):
        raise TypeError(f"'dictionary' section in {path} must be a dictionary.")

    paths = dictionary_section.get("paths", [])
    if isinstance(paths, str):
        paths = [paths]
    base_dir = Path(path).parent
    dictionaries = tuple(str(base_dir / str(p)) for p in paths)

    window_limit = y.get("window_limit")
    if window_limit is not None and (isinstance(window_limit, bool) or not isinstance(window_limit, int)):
        raise ValueError(f"window_limit in {path} must be an integer, got {window_limit!r}")

    try:
        return Config(
            corpus_size=int(dictionary_section.get("corpus_size", DEFAULT_CORPUS_SIZE)),
            window_limit=window_limit,
            term_index=int(dictionary_section.get("term_index", 0)),
            count_index=int(dictionary_section.get("count_index", 1)),
            dictionaries=dictionaries,
            show_progress=bool(y.get("show_progress", False)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid configuration value in {path}: {e}")
