"""
Challenge registry - extracts find-it code snippets from annotated source files.

Snippets are delimited with marker comments (``#`` or ``//``):

    # vuln-code-snippet start loginChallenge
    user = db.execute(query)  # vuln-code-snippet vuln-line loginChallenge
    # vuln-code-snippet end loginChallenge

Lines may be tagged ``vuln-line`` or ``neutral-line`` for one or more keys, and
``hide-line`` / ``hide-start`` ... ``hide-end`` remove lines from the snippet.
"""

import asyncio
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from findit.config import settings
from findit.snippets.errors import BrokenBoundary

logger = logging.getLogger(__name__)

MARKER = "vuln-code-snippet"
MARKER_RE = re.compile(r"\s*(?:#|//)\s*vuln-code-snippet\s+([\w-]+)(.*)$")


@dataclass(frozen=True)
class SnippetRecord:
    snippet: str
    vuln_lines: tuple[int, ...]
    neutral_lines: tuple[int, ...]


_code_challenges: dict[str, SnippetRecord] | None = None


def parse_marker(line: str) -> tuple[str, list[str], str] | None:
    """Split a line into (directive, keys, code before the marker)."""
    match = MARKER_RE.search(line)
    if not match:
        return None
    return match.group(1), match.group(2).split(), line[: match.start()].rstrip()


def find_challenge_keys(source: str) -> list[str]:
    """Return every key opened by a start marker, in order of appearance."""
    keys: list[str] = []
    for line in source.splitlines():
        marker = parse_marker(line)
        if marker and marker[0] == "start":
            keys.extend(k for k in marker[1] if k not in keys)
    return keys


def _snippet_body(lines: list[str], key: str) -> list[str]:
    start = end = None
    for i, line in enumerate(lines):
        marker = parse_marker(line)
        if not marker or key not in marker[1]:
            continue
        if marker[0] == "start" and start is None:
            start = i
        elif marker[0] == "end" and start is not None:
            end = i
            break

    if start is None or end is None:
        raise BrokenBoundary(f"Broken code snippet boundaries for: {key}")
    return lines[start + 1 : end]


def extract_snippet(source: str, key: str) -> SnippetRecord:
    """Build the snippet for ``key`` from a single source file."""
    body: list[str] = []
    hiding = False
    for line in _snippet_body(source.splitlines(), key):
        marker = parse_marker(line)
        directive = marker[0] if marker else None
        if directive == "hide-start":
            hiding = True
            continue
        if directive == "hide-end":
            hiding = False
            continue
        if hiding or directive in ("start", "end", "hide-line"):
            continue
        body.append(line)

    # Trim surrounding blank lines, line numbers count from the first kept line
    while body and not body[0].strip():
        body.pop(0)
    while body and not body[-1].strip():
        body.pop()

    text_lines: list[str] = []
    vuln_lines: list[int] = []
    neutral_lines: list[int] = []
    for number, line in enumerate(body, start=1):
        marker = parse_marker(line)
        if marker:
            directive, keys, code = marker
            if key in keys and directive == "vuln-line":
                vuln_lines.append(number)
            elif key in keys and directive == "neutral-line":
                neutral_lines.append(number)
            line = code
        text_lines.append(line.rstrip())

    return SnippetRecord(
        snippet="\n".join(text_lines),
        vuln_lines=tuple(vuln_lines),
        neutral_lines=tuple(neutral_lines),
    )


def find_files_with_code_challenges(source_dirs: list[str]) -> list[Path]:
    files: list[Path] = []
    for directory in source_dirs:
        root = Path(directory)
        if not root.is_dir():
            logger.warning(f"Snippet source directory not found: {root}")
            continue
        for path in sorted(p for p in root.rglob("*") if p.is_file()):
            try:
                if f"{MARKER} start" in path.read_text(encoding="utf-8"):
                    files.append(path)
            except UnicodeDecodeError:
                continue
    return files


def load_code_challenges(source_dirs: list[str]) -> dict[str, SnippetRecord]:
    """Scan source directories and extract every snippet. Raises BrokenBoundary."""
    challenges: dict[str, SnippetRecord] = {}
    for path in find_files_with_code_challenges(source_dirs):
        source = path.read_text(encoding="utf-8")
        for key in find_challenge_keys(source):
            if key in challenges:
                logger.warning(f"Duplicate code challenge {key} in {path}, keeping first")
                continue
            challenges[key] = extract_snippet(source, key)
    logger.info(f"Loaded {len(challenges)} code challenges")
    return challenges


async def get_code_challenges() -> dict[str, SnippetRecord]:
    global _code_challenges
    if _code_challenges is None:
        _code_challenges = await asyncio.to_thread(
            load_code_challenges, settings.challenge_source_dirs
        )
    return _code_challenges


def reset_code_challenges():
    global _code_challenges
    _code_challenges = None
