# -*- coding: utf-8 -*-
"""
Minimal logger; replace with structlog/loguru if desired.

`info` goes to stdout, `warn`/`error` to stderr. Query results printed by
the CLI go to stdout without a timestamp, so `info` is only used when the
caller asked for verbose output.
"""
import sys, time

def _stamp() -> str:
    return time.strftime('%H:%M:%S')

def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)
def warn(msg: str):  print(f"[{_stamp()}] WARNING: {msg}", file=sys.stderr)
def error(msg: str): print(f"[{_stamp()}] ERROR: {msg}", file=sys.stderr)
