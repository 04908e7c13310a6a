"""JSON output writing.

Serializes in-memory values to indented JSON files beneath an output root.
"""

import json
import os
from typing import Any


class WriteError(Exception):
    """Error creating a directory or writing an output file."""
    pass


class JSONWriter:
    """Writes JSON documents to paths relative to an output directory.

    Parent directories are created as needed and existing files are
    overwritten, so repeated writes of the same value produce the same bytes.

    Args:
        output_dir: Root directory for output files.
        pretty: Whether to pretty-print JSON with a 2-space indent (default True).
    """

    def __init__(self, output_dir: str, pretty: bool = True) -> None:
        self._output_dir = output_dir
        self._indent = 2 if pretty else None

    @property
    def output_dir(self) -> str:
        return self._output_dir

    def path_for(self, rel_path: str) -> str:
        """Resolve a '/'-separated relative path beneath the output directory.

        Raises:
            WriteError: If the path would land outside the output directory.
        """
        path = os.path.join(self._output_dir, *rel_path.split('/'))
        root = os.path.abspath(self._output_dir)
        if os.path.commonpath([root, os.path.abspath(path)]) != root:
            raise WriteError(f"Refusing to write outside {self._output_dir}: {rel_path}")
        return path

    def write(self, rel_path: str, data: Any) -> str:
        """Write data as JSON to rel_path. Returns the path written."""
        path = self.path_for(rel_path)
        try:
            text = json.dumps(data, indent=self._indent, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise WriteError(f"Failed to serialize {rel_path}: {e}") from e
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)
                f.write('\n')
        except OSError as e:
            raise WriteError(f"Failed to write {path}: {e}") from e
        return path
