"""
Build a start-word list from a downloaded word list.

What it does:
- Downloads a word list (plain text, one word per line, or an HTML page).
- If the response is HTML, keeps only the visible text.
- Keeps lowercase alphabetic words of exactly --length letters (default 8).
- De-duplicates while preserving source order, optionally samples, writes file.

Usage:
    python -m script.build_start_words --out packages/datasets/data/start.txt
    python -m script.build_start_words --length 7 --sample 500 --seed 1
"""

import re
import random
import argparse
from pathlib import Path

import requests
from bs4 import BeautifulSoup

URL = "https://raw.githubusercontent.com/first20hours/google-10000-english/master/google-10000-english-no-swears.txt"
WORD_RE = re.compile(r"^[a-z]+$")


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def page_text(resp: requests.Response) -> str:
    if "html" in resp.headers.get("Content-Type", ""):
        return BeautifulSoup(resp.text, "html.parser").get_text("\n", strip=True)
    return resp.text


def select_words(text: str, length: int) -> list[str]:
    tokens = (t.strip().lower() for t in text.splitlines())
    return unique_preserve_order(t for t in tokens if len(t) == length and WORD_RE.match(t))


def fetch_words(url: str = URL, length: int = 8) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    return select_words(page_text(r), length)


def main():
    ap = argparse.ArgumentParser(description="Build a start-word list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--sample", type=int, help="keep a random subset of this size")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--out", default="packages/datasets/data/start.txt")
    args = ap.parse_args()

    words = fetch_words(args.url, args.length)
    if args.sample and args.sample < len(words):
        words = random.Random(args.seed).sample(words, args.sample)

    Path(args.out).write_text("\n".join(words) + "\n", encoding="utf-8")
    print(f"Wrote {len(words)} start words -> {args.out}")


if __name__ == "__main__":
    main()
