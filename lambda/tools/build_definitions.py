# tools/build_definitions.py
"""
Turn a plain list of glosses into a weighted definitions file.

Requires: pip install wordfreq

Each input line is one definition. Its weight comes from the Zipf
frequency of the first word of the gloss: common words get small weights,
so lexweigh pairs them with the lightest word forms.

    python tools/build_definitions.py glosses.txt > defs.txt
"""
import argparse
import re
import sys
from pathlib import Path

from wordfreq import zipf_frequency

# zipf_frequency tops out around 8 for the most common words
ZIPF_CEILING = 8.0
HEAD_RE = re.compile(r"[^\W\d_]+(?:'[^\W\d_]+)?")


def head_word(gloss: str) -> str:
    m = HEAD_RE.search(gloss)
    return m.group(0).lower() if m else ""


def gloss_weight(gloss: str, lang: str = "en") -> float:
    head = head_word(gloss)
    if not head:
        return ZIPF_CEILING
    return round(max(0.0, ZIPF_CEILING - zipf_frequency(head, lang)), 3)


def main():
    parser = argparse.ArgumentParser(description="Weigh glosses by word frequency")
    parser.add_argument("glosses", help="file with one definition per line")
    parser.add_argument("--lang", default="en", help="wordfreq language code (default en)")
    args = parser.parse_args()

    glosses = [
        line.strip()
        for line in Path(args.glosses).read_text(encoding="utf-8").splitlines()
        if line.strip()
    ]
    rows = [(gloss_weight(g, args.lang), g) for g in glosses]
    # lightest first; ties keep file order
    rows.sort(key=lambda r: r[0])

    for weight, gloss in rows:
        sys.stdout.write(f"{weight} {gloss}\n")

    print(f"Weighed {len(rows)} definitions", file=sys.stderr)

if __name__ == "__main__":
    main()
