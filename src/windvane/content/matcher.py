# topmark:header:start
#
#   project      : Windvane
#   file         : matcher.py
#   file_relpath : src/windvane/content/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Match file paths against resolved content globs.

The resolver keeps content globs as opaque strings. The collaborator that
walks the filesystem uses `ContentMatcher` to decide which files are scanned:

    * ``{a,b}`` alternations are expanded first (`expand_braces`), since
      gitwildmatch has no brace syntax;
    * patterns are normalized (`normalize_pattern`): a leading ``./`` is
      dropped and backslashes become ``/``;
    * patterns starting with ``!`` exclude, regardless of their position in
      the list;
    * the remaining patterns are compiled with `pathspec` (gitwildmatch).

A path is selected when it matches at least one include pattern and no
exclude pattern.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from windvane.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from windvane.config.logging import WindvaneLogger

logger: WindvaneLogger = get_logger(__name__)

NEGATION_PREFIX: str = "!"


def _find_brace_group(pattern: str, start: int) -> tuple[int, int, list[int]] | None:
    """Locate the first expandable ``{...}`` group at or after ``start``.

    Returns:
        tuple[int, int, list[int]] | None: ``(open, close, commas)`` where
            ``commas`` are the positions of the top-level separators, or
            ``None`` if no group with at least one comma exists.
    """
    i: int = pattern.find("{", start)
    while i != -1:
        depth: int = 0
        commas: list[int] = []
        for j in range(i, len(pattern)):
            ch: str = pattern[j]
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    if commas:
                        return i, j, commas
                    break
            elif ch == "," and depth == 1:
                commas.append(j)
        # Unbalanced or comma-less braces are literal; try the next one.
        i = pattern.find("{", i + 1)
    return None


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternations of a glob pattern.

    Nested groups are supported, alternatives keep their written order and
    duplicate expansions are dropped. Braces without a comma (``{a}``) or
    without a closing brace are kept literally.

    Args:
        pattern (str): Glob pattern.

    Returns:
        list[str]: The expanded patterns; ``[pattern]`` when there is nothing
            to expand.

    Example:
        >>> expand_braces("src/**/*.{html,js}")
        ['src/**/*.html', 'src/**/*.js']
    """
    group: tuple[int, int, list[int]] | None = _find_brace_group(pattern, 0)
    if group is None:
        return [pattern]

    open_pos, close_pos, commas = group
    prefix: str = pattern[:open_pos]
    suffix: str = pattern[close_pos + 1 :]
    bounds: list[int] = [open_pos, *commas, close_pos]
    alternatives: list[str] = [pattern[a + 1 : b] for a, b in zip(bounds, bounds[1:])]

    expanded: list[str] = []
    for alt in alternatives:
        for item in expand_braces(prefix + alt + suffix):
            if item not in expanded:
                expanded.append(item)
    return expanded


def normalize_pattern(pattern: str) -> str:
    """Normalize a content glob for gitwildmatch matching.

    Backslashes are converted to ``/`` and a leading ``./`` is removed. An
    ``!`` negation prefix is kept in front of the normalized pattern.

    Args:
        pattern (str): Glob pattern as written in the configuration.

    Returns:
        str: The normalized pattern.
    """
    negated: bool = pattern.startswith(NEGATION_PREFIX)
    body: str = pattern[len(NEGATION_PREFIX) :] if negated else pattern
    body = body.replace("\\", "/")
    while body.startswith("./"):
        body = body[2:]
    return f"{NEGATION_PREFIX}{body}" if negated else body


def _rel_for_match(path: Path, base: Path | None) -> str | None:
    """Return a POSIX-style relative path for PathSpec matching.

    Without ``base`` the path is used as given. With ``base``, relative paths
    are resolved against the current working directory and ``None`` is
    returned when the result lies outside ``base``.
    """
    if base is None:
        posix: str = path.as_posix()
        return posix[2:] if posix.startswith("./") else posix
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        logger.trace("%s is outside %s; not selected", path, base)
        return None


@dataclass(frozen=True, slots=True)
class ContentMatcher:
    """Compiled content globs.

    Attributes:
        patterns (tuple[str, ...]): The source patterns, in order.
        include (PathSpec): Spec compiled from the non-negated patterns.
        exclude (PathSpec): Spec compiled from the negated patterns (without
            their ``!`` prefix).
    """

    patterns: tuple[str, ...]
    include: PathSpec
    exclude: PathSpec

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> ContentMatcher:
        """Compile content globs into a matcher.

        Args:
            patterns (Iterable[str]): Content globs, e.g. ``ResolvedConfig.content``.

        Returns:
            ContentMatcher: The compiled matcher.
        """
        source: tuple[str, ...] = tuple(patterns)
        include_lines: list[str] = []
        exclude_lines: list[str] = []
        for raw in source:
            for expanded in expand_braces(raw):
                pattern: str = normalize_pattern(expanded)
                if pattern.startswith(NEGATION_PREFIX):
                    exclude_lines.append(pattern[len(NEGATION_PREFIX) :])
                elif pattern:
                    include_lines.append(pattern)

        logger.debug(
            "Compiled content matcher: %d include, %d exclude pattern(s)",
            len(include_lines),
            len(exclude_lines),
        )
        logger.trace("Include patterns: %s", include_lines)
        logger.trace("Exclude patterns: %s", exclude_lines)
        return cls(
            patterns=source,
            include=PathSpec.from_lines(GitWildMatchPattern, include_lines),
            exclude=PathSpec.from_lines(GitWildMatchPattern, exclude_lines),
        )

    def matches(self, path: Path | str, base: Path | None = None) -> bool:
        """Return True if ``path`` is selected by the content globs.

        Args:
            path (Path | str): File path to test.
            base (Path | None): Directory the globs are relative to. When
                given, ``path`` is made relative to it before matching, and
                paths outside ``base`` are never selected.

        Returns:
            bool: ``True`` if an include pattern matches and no exclude
                pattern does.
        """
        rel: str | None = _rel_for_match(Path(path), base)
        if rel is None or not self.include.match_file(rel):
            return False
        return not self.exclude.match_file(rel)

    def filter(self, paths: Iterable[Path], base: Path | None = None) -> list[Path]:
        """Return the paths selected by the content globs, in input order."""
        return [p for p in paths if self.matches(p, base)]
