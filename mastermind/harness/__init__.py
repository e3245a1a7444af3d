from .core import run_case, run_sweep, summarize
from .io import format_code, write_csv, write_manifest

__all__ = ["run_case", "run_sweep", "summarize", "format_code", "write_csv", "write_manifest"]
