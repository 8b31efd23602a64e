#!/usr/bin/env python3
from dotenv import load_dotenv

load_dotenv()

import argparse
import sys
from typing import List, Optional

from kanatype import SAMPLE_TEXTS
from kanatype.logger import logger
from kanatype.nlp import get_chunker, UnrecognizedKanaError, UnrecognizedPolicy
from kanatype.nlp.japanese import romanize

def format_target(text: str, target, romaji: str) -> str:
    """Render one chunked text as a header line plus one line per chunk."""
    lines = [f"{text}  ->  {romaji}"]
    for chunk in target.chunks:
        lines.append(f"  {chunk.displayed} -> {list(chunk.accepted)}")
    return "\n".join(lines)

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Print the typing chunks produced for Japanese practice text."
    )
    parser.add_argument("texts", nargs="*", help="Texts to chunk (defaults to the built-in samples)")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on input that cannot be chunked instead of skipping it")
    parser.add_argument("--json", action="store_true", help="Print one JSON typing target per line")
    args = parser.parse_args(argv)

    policy = UnrecognizedPolicy.raise_ if args.strict else None
    chunker = get_chunker("ja", policy)
    texts = args.texts or SAMPLE_TEXTS

    failed = 0
    for text in texts:
        try:
            target = chunker.to_target(text)
        except UnrecognizedKanaError as e:
            logger.error(f"❌ {e}")
            failed += 1
            continue

        if args.json:
            print(target.model_dump_json())
        else:
            print(format_target(text, target, romanize(text, chunker)))

    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
