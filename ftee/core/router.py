"""StreamRouter — fans payload lines out to the active destinations.

The router owns every output file opened during a run. Destinations are
opened lazily the first time a directive names them and are never reopened
or truncated again within the run; a later directive naming the same file
simply makes it active again and appends.

A run ends with exactly one call to :meth:`StreamRouter.finalize`:

- on success every destination is flushed and closed (commit);
- on failure every destination is closed and its file deleted (rollback),
  so a failed run leaves no output behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from types import TracebackType
from typing import IO

from ftee.core.errors import DestinationCreateError, WriteError

logger = logging.getLogger(__name__)

Opener = Callable[[str], IO[str]]


def file_opener(encoding: str = "utf-8") -> Opener:
    """Return an opener that creates (or truncates) a text file per name.

    Newline translation is disabled so line terminators are written
    exactly as they were read.
    """

    def _open(name: str) -> IO[str]:
        return open(name, "w", encoding=encoding, newline="")

    return _open


class StreamRouter:
    """Run-scoped destination set plus the current active target list.

    Parameters
    ----------
    opener:
        Callable creating a writable text handle for a destination name.
        Defaults to :func:`file_opener` with UTF-8 encoding.
    remove:
        Callable deleting a destination's backing file during rollback.
        Defaults to unlinking the path, ignoring files already gone.

    Usage
    -----
    >>> with StreamRouter() as router:
    ...     router.ensure_open(["out1.txt", "out2.txt"])
    ...     router.route("hello\\n")
    """

    def __init__(
        self,
        opener: Opener | None = None,
        remove: Callable[[str], None] | None = None,
    ) -> None:
        self._opener = opener or file_opener()
        self._remove = remove or _unlink
        self._destinations: dict[str, IO[str]] = {}
        self._active: list[tuple[str, IO[str]]] = []
        self._finalized = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def destinations(self) -> list[str]:
        """Names of every destination opened so far, in opening order."""
        return list(self._destinations)

    @property
    def active_targets(self) -> list[str]:
        """Names currently receiving payload lines, duplicates included."""
        return [name for name, _ in self._active]

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("StreamRouter has already been finalized")

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    def ensure_open(self, names: Sequence[str]) -> None:
        """Open any destination in *names* not yet open, then activate *names*.

        Existing destinations are reused untouched. Opening stops at the
        first failure; destinations opened earlier in the same call stay in
        the destination set so rollback can remove them.

        Raises
        ------
        DestinationCreateError
            If a destination cannot be created or truncated. The active
            target list is left unchanged.
        """
        self._check_open()
        for name in names:
            if name in self._destinations:
                continue
            try:
                handle = self._opener(name)
            except (OSError, ValueError) as exc:
                reason = getattr(exc, "strerror", None) or str(exc)
                raise DestinationCreateError(name, reason) from exc
            self._destinations[name] = handle
            logger.debug("Opened destination %s", name)

        self._active = [(name, self._destinations[name]) for name in names]

    def route(self, line: str) -> int:
        """Write *line* verbatim to every active destination, in order.

        Returns the number of writes performed (zero when nothing is active).

        Raises
        ------
        WriteError
            If any write fails. Remaining destinations are not written.
        """
        self._check_open()
        for name, handle in self._active:
            try:
                handle.write(line)
            except OSError as exc:
                raise WriteError(name, exc.strerror or str(exc)) from exc
        return len(self._active)

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def finalize(self, success: bool) -> None:
        """Commit or roll back every destination opened during the run.

        Only the first call has any effect.

        Raises
        ------
        WriteError
            If committing fails while flushing or closing a destination.
            The run is rolled back before the error is raised.
        """
        if self._finalized:
            return
        self._finalized = True
        self._active = []

        if success:
            failure = self._commit()
            if failure is None:
                logger.info("Committed %d destination(s)", len(self._destinations))
                return
            self._rollback()
            raise failure

        self._close_quietly()
        self._rollback()

    def _commit(self) -> WriteError | None:
        failure: WriteError | None = None
        for name, handle in self._destinations.items():
            try:
                handle.flush()
                handle.close()
            except OSError as exc:
                if failure is None:
                    failure = WriteError(name, exc.strerror or str(exc))
                    failure.__cause__ = exc
                self._close_one(name, handle)
        return failure

    def _close_quietly(self) -> None:
        for name, handle in self._destinations.items():
            self._close_one(name, handle)

    @staticmethod
    def _close_one(name: str, handle: IO[str]) -> None:
        try:
            handle.close()
        except OSError as exc:
            logger.warning("Could not close %s: %s", name, exc)

    def _rollback(self) -> None:
        for name in self._destinations:
            try:
                self._remove(name)
            except OSError as exc:
                logger.warning("Could not remove %s: %s", name, exc)
        logger.info("Rolled back %d destination(s)", len(self._destinations))

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> StreamRouter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.finalize(success=exc_type is None)


def _unlink(name: str) -> None:
    Path(name).unlink(missing_ok=True)
