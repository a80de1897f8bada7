from .core import replay
from .io import write_csv, write_manifest

__all__ = ["replay", "write_csv", "write_manifest"]
