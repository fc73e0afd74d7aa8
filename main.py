import argparse
import sys
from pathlib import Path

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from wordseg.config import load_config
from wordseg.data_validation import validate
from wordseg.frequency_model import FrequencyModel
from wordseg.io_utils import load_dictionary, save_results
from wordseg.segmenter import segment_lines

def main():
    """
    Main command-line interface for the word segmenter.

    This script performs the following steps:
    1.  Loads the configuration file (`config.yaml`).
    2.  Builds a `FrequencyModel` from the configured (or given) dictionary
        files and freezes it.
    3.  Collects the strings to segment from `--text` and/or `--input`.
    4.  Segments each string and prints the input next to the output.
    5.  Optionally validates each result and writes all results to JSON.
    """
    parser = argparse.ArgumentParser(
        description="Insert word boundaries into unspaced text using a unigram frequency dictionary.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--text",
        action="append",
        default=[],
        help="A string to segment. May be given several times."
    )
    parser.add_argument(
        "--input",
        help="Path to a text file with one string to segment per line."
    )
    parser.add_argument(
        "--output",
        help="Path to write the results as JSON."
    )
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the configuration YAML file."
    )
    parser.add_argument(
        "--dictionary",
        action="append",
        default=None,
        help="Dictionary file to load instead of the configured ones. May be given several times."
    )
    parser.add_argument(
        "--window-limit",
        type=int,
        default=None,
        help="Maximum word length to consider. Defaults to the longest dictionary word."
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check every result for boundary and round-trip errors."
    )
    args = parser.parse_args()

    if not args.text and not args.input:
        parser.error("at least one of --text or --input is required")

    try:
        # 1. Load configuration
        print(f"Loading configuration from {args.config}...")
        cfg = load_config(args.config)
        window_limit = args.window_limit if args.window_limit is not None else cfg.window_limit

        # 2. Build the frequency model
        model = FrequencyModel(corpus_size=cfg.corpus_size)
        dictionaries = args.dictionary if args.dictionary else list(cfg.dictionaries)
        if not dictionaries:
            print("Warning: No dictionary configured. Every word will be scored as unknown.")
        for dictionary_path in dictionaries:
            if not load_dictionary(dictionary_path, model, cfg.term_index, cfg.count_index):
                raise FileNotFoundError(f"Dictionary file not found at: {dictionary_path}")
        model.freeze()

        # 3. Collect inputs
        inputs = [text.strip() for text in args.text]
        if args.input:
            print(f"Loading input from {args.input}...")
            with open(args.input, "r", encoding="utf-8") as f:
                inputs.extend(line.strip() for line in f)

        # 4. Segment
        results = segment_lines(inputs, model, window_limit, show_progress=cfg.show_progress)

        issue_total = 0
        for text, result in zip(inputs, results):
            print(f"Input : {text}")
            print(f"Output: {result.segmented_text}")
            if args.validate:
                report = validate(text, result)
                issue_total += report["issue_count"]
                for issue in report["issues"]:
                    print(f"  [{issue['type']}] {issue['message']}")

        if args.validate:
            print(f"\nValidation finished with {issue_total} issue(s).")

        # 5. Write results
        if args.output:
            save_results(args.output, inputs, results)
            print(f"\nSuccessfully wrote results to {args.output}")

    except (FileNotFoundError, ValueError, TypeError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
