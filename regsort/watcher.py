"""Initial sweep and live watching of the source directory."""

from __future__ import annotations

import logging
import os
import queue
from collections.abc import Iterator
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from regsort.config import Config
from regsort.executor import TaskExecutor

log = logging.getLogger(__name__)


def _walk_files(root: str) -> Iterator[Path]:
    for directory, _subdirs, names in os.walk(root):
        for name in names:
            path = Path(directory, name)
            if path.is_file() and not path.is_symlink():
                yield path


class _CreatedFileHandler(FileSystemEventHandler):
    def __init__(self, sink: queue.Queue[Path]) -> None:
        super().__init__()
        self._sink = sink

    def on_created(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._sink.put(Path(os.fsdecode(event.src_path)))


class SourceWatcher:
    """Sorts what is already in the source directory, then what arrives."""

    def __init__(self, config: Config) -> None:
        self.properties = config.config
        self.task_executor = TaskExecutor(self.properties.dry_run, config.rules)

    def watch(self) -> None:
        """Sort existing files, then keep sorting new ones; never returns."""
        self.run_initial_clean_up()
        self.subscribe_to_source()

    def run_initial_clean_up(self) -> None:
        """Sort every regular file found under the source directory."""
        source_dir = self.properties.source_dir
        log.info("Running initial clean up in '%s'", source_dir)
        for path in _walk_files(source_dir):
            self.task_executor.execute(path)
        log.info("Initial clean up finished.")

    def subscribe_to_source(self) -> None:
        """Sort each file created under the source directory, forever."""
        source_dir = self.properties.source_dir
        created: queue.Queue[Path] = queue.Queue()
        observer = Observer()
        observer.schedule(_CreatedFileHandler(created), source_dir, recursive=True)
        log.info("Subscribing to changes in '%s'", source_dir)
        observer.start()
        try:
            while True:
                path = created.get()
                log.debug("Received creation of '%s'", path)
                if path.exists():
                    self.task_executor.execute(path)
        finally:
            observer.stop()
            observer.join()