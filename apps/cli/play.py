# apps/cli/play.py
"""
Interactive terminal front-end for the word scramble game.

This script:
  1) Loads the start-word list (fatal if missing) and builds the dictionary oracle.
  2) Starts a session and prints the root word.
  3) Reads candidates from stdin, one per line:
       - accepted words are listed newest-first with their lengths
       - rejections print "<title>: <message>"
       - empty input is ignored
       - a failed dictionary lookup prints "error: ..." to stderr and play goes on
     Commands: ":new" starts a new session, ":quit" (or EOF) exits.
"""

from __future__ import annotations

import argparse
import sys

import requests

from packages.dictionary import get_oracle_ids, oracle_from_args
from packages.engine import Outcome
from packages.game import DEFAULT_START_WORDS, GameSession, InitializationError, load_start_words


def _print_board(session: GameSession) -> None:
    print(f"\n== {session.root_word} ==  (score {session.score})")
    for w in session.used_words:
        print(f"  ({len(w)}) {w}")


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble: spell words from the root word")
    ap.add_argument("--start-words", default=str(DEFAULT_START_WORDS),
                    help="path to the start-word list (one word per line)")
    ap.add_argument("--oracle", default="wordfreq",
                    help=f"dictionary oracle id (one of: {', '.join(get_oracle_ids())})")
    ap.add_argument("--words", help="word list for --oracle wordlist")
    ap.add_argument("--lang", default="en", help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=1.0,
                    help="minimum Zipf frequency for --oracle wordfreq")
    ap.add_argument("--seed", type=int, help="RNG seed for root word selection")
    args = ap.parse_args(argv)

    try:
        start_words = load_start_words(args.start_words)
    except InitializationError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        sys.stderr.write(f"error: {e}{cause}\n")
        return 2

    try:
        oracle = oracle_from_args(args)
    except ValueError as e:
        ap.error(str(e))
    session = GameSession(oracle, start_words=start_words, seed=args.seed)
    session.start()
    _print_board(session)

    for line in sys.stdin:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            session.start()
            _print_board(session)
            continue

        # Dictionary failures cost one candidate, not the session
        try:
            outcome = session.submit(line)
        except (requests.RequestException, LookupError) as e:
            sys.stderr.write(f"error: dictionary lookup failed ({e})\n")
            continue
        if outcome is Outcome.ACCEPTED:
            _print_board(session)
        elif session.last_feedback:
            title, message = session.last_feedback
            print(f"{title}: {message}")

    print(f"Final score: {session.score} ({len(session.used_words)} words)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
