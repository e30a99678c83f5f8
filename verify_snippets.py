"""
Verify the vuln-code-snippet markers in challenge source files.

Usage:
    python verify_snippets.py [SOURCE_DIR ...]

Without arguments the directories from CHALLENGE_SOURCE_DIRS (settings) are
scanned. Exits non-zero when a snippet has broken boundaries.
"""

from __future__ import annotations

import argparse
import sys

from findit.config import settings
from findit.snippets.errors import BrokenBoundary
from findit.snippets.registry import load_code_challenges
from findit.snippets.verdict import hint_file_path, load_hints


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("source_dirs", nargs="*", help="Directories to scan for snippets")
    args = parser.parse_args(argv)

    source_dirs = args.source_dirs or settings.challenge_source_dirs
    try:
        challenges = load_code_challenges(source_dirs)
    except BrokenBoundary as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not challenges:
        print(f"WARNING: no code challenges found in {', '.join(source_dirs)}", file=sys.stderr)

    for key, record in challenges.items():
        hints = "no hint file"
        if hint_file_path(key).exists():
            hints = f"{len(load_hints(key))} hints"
        vuln = ", ".join(str(n) for n in record.vuln_lines) or "-"
        neutral = ", ".join(str(n) for n in record.neutral_lines) or "-"
        print(f"{key}: vuln lines {vuln}; neutral lines {neutral}; {hints}")
        if not record.vuln_lines:
            print(f"WARNING: {key} has no vulnerable lines", file=sys.stderr)

    print(f"OK: {len(challenges)} code challenges")
    return 0


if __name__ == "__main__":
    sys.exit(main())
