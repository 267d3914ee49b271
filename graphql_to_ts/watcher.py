"""Re-run generation whenever the input schema file changes."""

from collections.abc import Callable
from pathlib import Path
from threading import Event

from watchfiles import Change, watch

from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaWatcher:
    """Watch one schema file and call ``on_change`` after each change batch.

    Callbacks run on the watching thread, one at a time, so a regeneration
    never overlaps the previous one.
    """

    def __init__(
        self,
        schema_path: str | Path,
        on_change: Callable[[], None],
        debounce_ms: int = 300,
    ) -> None:
        self.schema_path = Path(schema_path).resolve()
        self._on_change = on_change
        self._debounce_ms = debounce_ms
        self.runs = 0

    def _is_schema_file(self, change: Change, path: str) -> bool:
        return Path(path).resolve() == self.schema_path

    def run(self, stop_event: Event | None = None) -> int:
        """Block until interrupted or ``stop_event`` is set.

        Returns:
            Number of regenerations triggered.
        """
        logger.info("Watching %s for changes", self.schema_path)

        # Editors often replace files atomically, so watch the directory
        for changes in watch(
            self.schema_path.parent,
            watch_filter=self._is_schema_file,
            debounce=self._debounce_ms,
            recursive=False,
            stop_event=stop_event,
            raise_interrupt=False,
        ):
            logger.info("Detected %d change(s) to %s", len(changes), self.schema_path.name)
            self.runs += 1
            try:
                self._on_change()
            except Exception:
                logger.exception("Error in watcher callback")

        logger.info("Watcher stopped for %s", self.schema_path)
        return self.runs
