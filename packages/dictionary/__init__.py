from __future__ import annotations
from typing import List
from .base import BaseOracle, REGISTRY, register

from . import wordlist  # noqa: F401
from . import frequency  # noqa: F401
from . import remote  # noqa: F401


def create_oracle(oracle_id: str, **kwargs) -> BaseOracle:
    """
    Factory: instantiate a registered oracle by id, forwarding constructor kwargs.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


def oracle_from_args(args) -> BaseOracle:
    """
    Build the oracle picked by the CLI flags (--oracle, --words, --lang, --min-zipf).
    Raises ValueError for an unknown id, a missing --words, or an unsupported language.
    """
    if args.oracle == "wordlist":
        if not args.words:
            raise ValueError("--words is required with --oracle wordlist")
        return create_oracle("wordlist", path=args.words, language=args.lang)
    if args.oracle == "wordfreq":
        return create_oracle("wordfreq", language=args.lang, min_zipf=args.min_zipf)
    return create_oracle(args.oracle, language=args.lang)
