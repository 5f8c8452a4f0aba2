# src/soundalike/demo.py
import argparse
import json
import logging
import os
import sys


def compare(word_a: str, word_b: str, *, debug: bool = False) -> dict:
    """Does: Collect phonetic codes and metric scores for two words."""
    from soundalike.metrics import dice_coefficient, jaro_winkler_similarity, levenshtein_distance
    from soundalike.phonetic import double_metaphone

    codes_a = double_metaphone(word_a, debug=debug)
    codes_b = double_metaphone(word_b, debug=debug)
    return {
        "words": [word_a, word_b],
        "codes": [codes_a._asdict(), codes_b._asdict()],
        "phonetic_match": codes_a == codes_b,
        "levenshtein": levenshtein_distance(word_a, word_b),
        "jaro_winkler": round(jaro_winkler_similarity(word_a, word_b), 4),
        "dice": round(dice_coefficient(word_a, word_b), 4),
    }


def main(argv=None):
    """CLI demo: compare two words phonetically and with the string metrics."""
    from soundalike.utils import debug, reload_topics

    parser = argparse.ArgumentParser(
        prog="soundalike-demo",
        description="Compare two words: Double Metaphone codes, Levenshtein, Jaro-Winkler, Dice.",
    )
    parser.add_argument("word_a", help="First word (e.g. Schmidt)")
    parser.add_argument("word_b", help="Second word (e.g. Smith)")
    parser.add_argument("--debug", action="store_true", help="Trace encoder rules")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
        os.environ.setdefault("SOUNDALIKE_DEBUG_TOPICS", "demo")
        reload_topics()

    try:
        result = compare(args.word_a, args.word_b, debug=args.debug)
        debug(f"compared {args.word_a!r} with {args.word_b!r}", topic="demo")
        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
