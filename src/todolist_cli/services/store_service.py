"""Persistence of the list file.

The whole ListFile is read at the start of an invocation and, after a
mutation, written back in one piece: JSON goes to a temporary file beside the
store which then replaces it, so an interrupted run leaves the previous file
intact. There is no locking; two concurrent invocations race and the last
writer wins.
"""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from todolist_cli.exceptions import StoreLoadFailure, StoreWriteFailure
from todolist_cli.models.list_file import ListFile
from todolist_cli.utils.logger import get_logger


def dump_list_file(store: ListFile) -> str:
    """Serialize a ListFile to its on-disk JSON text."""
    data = store.model_dump(mode="json", by_alias=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def parse_list_file(text: str) -> ListFile:
    """Deserialize on-disk JSON text into a ListFile.

    Raises:
        StoreLoadFailure: If the text is not valid JSON or not a valid list file
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StoreLoadFailure(f"List file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise StoreLoadFailure("List file must contain a JSON object")

    try:
        store = ListFile.model_validate(data)
    except ValidationError as e:
        raise StoreLoadFailure(f"List file is corrupt: {e}") from e

    if data.get("focused") != store.focused:
        get_logger().warning(
            "repaired stale focus %r -> %r", data.get("focused"), store.focused
        )
    return store


class StoreService:
    """Reads and writes the list file at one resolved path."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> ListFile:
        """Load the list file, creating an empty one on first run.

        Raises:
            StoreLoadFailure: If the file cannot be read or is corrupt
        """
        logger = get_logger()
        if not self.path.exists():
            logger.info("no list file at %s, creating an empty one", self.path)
            store = ListFile()
            self.save(store)
            return store

        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StoreLoadFailure(f"Failed to read list file {self.path}: {e}") from e

        store = parse_list_file(text)
        logger.debug("loaded %d list(s) from %s", len(store.lists), self.path)
        return store

    def save(self, store: ListFile) -> None:
        """Atomically overwrite the list file with ``store``.

        Raises:
            StoreWriteFailure: If the file cannot be written
        """
        text = dump_list_file(store)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, UnicodeError) as e:
            raise StoreWriteFailure(
                f"Failed to write list file {self.path}: {e}"
            ) from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        get_logger().debug("saved %d list(s) to %s", len(store.lists), self.path)

    @contextmanager
    def edit(self) -> Iterator[ListFile]:
        """Load the store, yield it for mutation, then save it.

        Nothing is written if the body raises.
        """
        store = self.load()
        yield store
        self.save(store)
