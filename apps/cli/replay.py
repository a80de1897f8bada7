# apps/cli/replay.py
"""
Replay a file of candidate words against a root word and write a report.

This script:
  1) Optionally validates the start-word list (prints counts + SHA) and picks
     the root word from it when --root is not given.
  2) Loads the candidates file (one raw candidate per line, blanks kept so
     they show up as "empty" outcomes).
  3) Replays them with a live progress indicator and writes:
       - CSV:  one row per candidate (outcome, feedback, history size, timing)
       - JSON: manifest with config, outcome counts, git commit, etc.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import Counter
from pathlib import Path

from tqdm import tqdm

from packages.datasets import read_lines, validate_start_words, pretty_summary
from packages.dictionary import get_oracle_ids, oracle_from_args
from packages.game import InitializationError, load_start_words, start_session
from packages.harness import replay
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main(argv=None):
    """
    Parse CLI args, resolve the root word, replay with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble: replay candidates against a root word")
    ap.add_argument("--root", help="root word (default: random pick from --start-words)")
    ap.add_argument("--start-words", help="start-word list used when --root is not given")
    ap.add_argument("--candidates", required=True, help="file with one candidate per line")
    ap.add_argument("--oracle", default="wordfreq",
                    help=f"dictionary oracle id (one of: {', '.join(get_oracle_ids())})")
    ap.add_argument("--words", help="word list for --oracle wordlist")
    ap.add_argument("--lang", default="en", help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=1.0,
                    help="minimum Zipf frequency for --oracle wordfreq")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for root word selection")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show replay progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Resolve the root word
    start_report = None
    if args.root is not None:
        root = args.root.strip().lower()
        if not root:
            ap.error("--root must not be blank")
    elif args.start_words:
        start_report = validate_start_words(args.start_words)
        print(pretty_summary(start_report))
        try:
            root = start_session(load_start_words(args.start_words), random.Random(args.seed))
        except InitializationError as e:
            sys.stderr.write(f"error: {e}\n")
            return 2
    else:
        ap.error("one of --root or --start-words is required")

    # 2) Candidates and oracle
    candidates = read_lines(args.candidates)
    try:
        oracle = oracle_from_args(args)
    except ValueError as e:
        ap.error(str(e))

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    start = time.time()
    if mode == "bar":
        rows = replay(root, tqdm(candidates, ncols=80, desc="Replaying", unit="word"), oracle)
    else:
        rows = replay(root, candidates, oracle)
    if mode == "plain":
        sys.stderr.write(f"[{len(rows)}/{len(candidates)}] done in {time.time() - start:.1f}s\n")
        sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(rows, str(csv_path))
    outcomes = Counter(r["outcome"] for r in rows)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "root_word": root,
        "start_words": start_report,
        "num_candidates": len(rows),
        "outcomes": dict(outcomes),
        "oracle_id": oracle.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Root word: {root} | accepted={outcomes.get('accepted', 0)} of {len(rows)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
