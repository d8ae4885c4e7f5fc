"""Git-backed subject filtering for ``--since``.

A :class:`Diff` answers whether a line range of a file was touched
between two revisions; a :class:`SubjectFilter` applies that question
to a subject.  All git access goes through the
:class:`~mutant.core.protocols.World` so no real repository is needed in
tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mutant.core.protocols import World
from mutant.exceptions import RepositoryError

logger = logging.getLogger(__name__)

HEAD: str = "HEAD"


@dataclass(frozen=True)
class Diff:
    """Changes between *from_rev* and *to_rev* of the current repository."""

    world: World
    from_rev: str
    to_rev: str

    def touches(self, path: Path | str, line_range: range) -> bool:
        """Return whether any line of *line_range* in *path* changed.

        An empty *line_range*, and files outside the working directory or
        not tracked by git, are never considered touched.

        Raises
        ------
        RepositoryError
            When ``git log`` fails.
        """
        path = Path(path)
        if not line_range:
            return False
        if not (self._within_working_directory(path) and self._tracks(path)):
            return False

        command = (
            "git",
            "log",
            f"{self.from_rev}...{self.to_rev}",
            "--ignore-all-space",
            "-L",
            f"{line_range.start},{line_range.stop - 1}:{path}",
        )
        result = self.world.capture(*command)
        if result.returncode != 0:
            raise RepositoryError(
                f"Command {' '.join(command)} failed!",
                hint=result.stderr.strip() or None,
            )
        return bool(result.stdout)

    def _tracks(self, path: Path) -> bool:
        return self.world.system("git", "ls-files", "--error-unmatch", "--", str(path))

    @staticmethod
    def _within_working_directory(path: Path) -> bool:
        working_directory = Path.cwd()
        absolute = path if path.is_absolute() else working_directory / path
        return working_directory in absolute.parents or absolute == working_directory


@dataclass(frozen=True)
class SubjectFilter:
    """Predicate selecting subjects whose source lines were touched by *diff*.

    A subject is any object exposing ``source_path`` and ``source_lines``
    (a :class:`range` of line numbers).
    """

    diff: Diff

    def __call__(self, subject: Any) -> bool:
        touched = self.diff.touches(subject.source_path, subject.source_lines)
        logger.debug("Subject %s touched since %s: %s", subject, self.diff.to_rev, touched)
        return touched
