"""
Diff Filter

Removes excluded file sections from a unified diff. Patterns are matched
against each section's path as an exact name or suffix, a basename,
or a glob.
"""

import re
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.diff import DiffSection, SECTION_MARKER, PLACEHOLDER_DIFF


logger = logging.getLogger(__name__)

PathMatcher = Callable[[str, str], bool]

_A_PATH_PATTERN = re.compile(r'(?:^|\s)a/(\S+)')
_B_PATH_PATTERN = re.compile(r'(?:^|\s)b/(\S+)')


def parse_exclude_patterns(raw: Optional[str]) -> List[str]:
    """
    Parse a comma separated pattern list.

    Args:
        raw: Value such as ``"package-lock.json, *.lock"``

    Returns:
        Trimmed, non-empty patterns in input order
    """
    if not raw:
        return []
    return [part.strip() for part in raw.split(',') if part.strip()]


def glob_to_regex(pattern: str) -> str:
    """Translate ``*`` and ``?`` wildcards into an anchored regex source."""
    translated = pattern.replace('.', r'\.').replace('*', '.*').replace('?', '.')
    return f'^{translated}$'


def extract_section_path(segment: str) -> Optional[str]:
    """
    Extract the file path from a section's header line.

    The ``a/`` side wins; ``b/`` is the fallback.

    Args:
        segment: Section text following the section marker

    Returns:
        File path or None if the header carries neither side
    """
    header = segment.split('\n', 1)[0]
    for pattern in (_A_PATH_PATTERN, _B_PATH_PATTERN):
        match = pattern.search(header)
        if match:
            return match.group(1)
    return None


def split_diff(diff: str) -> Tuple[str, List[DiffSection]]:
    """
    Split a diff into its preamble and file sections.

    Returns:
        Tuple of (preamble, sections in input order)
    """
    segments = diff.split(SECTION_MARKER)
    sections = [DiffSection(path=extract_section_path(s), text=s) for s in segments[1:]]
    return segments[0], sections


def _matches_literal(path: str, pattern: str) -> bool:
    return path == pattern or path.endswith(pattern)


def _matches_basename(path: str, pattern: str) -> bool:
    return path.rsplit('/', 1)[-1] == pattern


def _matches_glob(path: str, pattern: str) -> bool:
    try:
        regex = re.compile(glob_to_regex(pattern))
    except re.error as e:
        logger.warning(f"Invalid exclude pattern '{pattern}': {e}")
        return False
    return regex.match(path) is not None


# Tried in order for every pattern; the first hit excludes the path.
MATCHERS: List[Tuple[str, PathMatcher]] = [
    ('literal', _matches_literal),
    ('basename', _matches_basename),
    ('glob', _matches_glob),
]


def path_matches(path: str, pattern: str) -> bool:
    """Check a single path against a single exclusion pattern."""
    for kind, matcher in MATCHERS:
        if matcher(path, pattern):
            logger.debug(f"Excluding {path}: {kind} match on '{pattern}'")
            return True
    return False


def is_excluded(path: Optional[str], patterns: Sequence[str]) -> bool:
    """Sections without a readable path are always kept."""
    if path is None:
        return False
    return any(path_matches(path, pattern) for pattern in patterns)


def filter_diff(diff: str, patterns: Sequence[str]) -> str:
    """
    Remove the file sections whose path matches any exclusion pattern.

    Args:
        diff: Unified diff text
        patterns: Exclusion patterns (exact name, suffix, basename or glob)

    Returns:
        Diff with the matching sections removed, in original order. When
        every section is excluded a single-file placeholder diff is returned
        so the result is never empty.
    """
    patterns = [p for p in patterns if p]
    if not patterns:
        return diff

    preamble, sections = split_diff(diff)
    if not sections:
        return diff

    kept = []
    for section in sections:
        if section.path is None:
            logger.debug("Keeping diff section without a readable path")
            kept.append(section)
        elif not is_excluded(section.path, patterns):
            kept.append(section)

    excluded = len(sections) - len(kept)
    logger.info(f"Diff filter kept {len(kept)} of {len(sections)} files ({excluded} excluded)")

    if not kept:
        logger.warning("All files in the diff were excluded; using placeholder diff")
        return preamble + PLACEHOLDER_DIFF

    return preamble + ''.join(section.render() for section in kept)
