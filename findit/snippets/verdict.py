from collections.abc import Sequence
from pathlib import Path

import yaml

from findit.config import settings
from findit.i18n import Translator

SINGLE_LINE_HINT = (
    "Line {lines} is responsible for this vulnerability or security flaw. "
    "Select it and submit to proceed."
)
MULTI_LINE_HINT = (
    "Lines {lines} are responsible for this vulnerability or security flaw. "
    "Select them and submit to proceed."
)


def evaluate_verdict(
    vuln_lines: Sequence[int],
    neutral_lines: Sequence[int],
    selected_lines: Sequence[int] | None,
) -> bool:
    """True when vuln_lines <= selected_lines <= vuln_lines | neutral_lines."""
    if selected_lines is None:
        return False
    if len(vuln_lines) > len(selected_lines):
        return False
    if not all(line in selected_lines for line in vuln_lines):
        return False
    ok_lines = set(vuln_lines) | set(neutral_lines)
    return all(line in ok_lines for line in selected_lines)


def hint_file_path(key: str) -> Path:
    return Path(settings.codefixes_dir) / f"{key}.info.yml"


def load_hints(key: str) -> list[str]:
    """Read the stored hints for a challenge. Not cached, the file may change."""
    path = hint_file_path(key)
    if not path.exists():
        return []
    info = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return ["" if hint is None else str(hint) for hint in info.get("hints") or []]


def direct_hint(vuln_lines: Sequence[int], translate: Translator) -> str:
    lines = ", ".join(str(line) for line in vuln_lines)
    template = SINGLE_LINE_HINT if len(vuln_lines) == 1 else MULTI_LINE_HINT
    return translate(template, lines=lines)


def next_hint(
    hints: list[str], attempts: int, vuln_lines: Sequence[int], translate: Translator
) -> str | None:
    """
    Pick the hint for the given number of previous find-it attempts.

    Once the stored hints are exhausted the vulnerable lines are named directly.
    """
    if not hints:
        return None
    if attempts > len(hints):
        return direct_hint(vuln_lines, translate)
    if attempts < 1:
        return None
    hint = hints[attempts - 1]
    return translate(hint) if hint else None
