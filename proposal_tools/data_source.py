"""
Loading the proposal YAML and the Markdown files it references.

The pipeline talks to a "source" object with two methods:
    load_document(path) -> dict
    read_text(path) -> str
FileProposalSource reads from disk; tests can pass an in-memory replacement.
"""
from pathlib import Path

import yaml

from proposal_tools.errors import InputDocumentError


class FileProposalSource:

    def load_document(self, path: str | Path) -> dict:
        """Parse the proposal YAML. Empty file -> {}; non-mapping root -> InputDocumentError."""
        path = Path(path)
        raw = self.read_text(path)
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise InputDocumentError(f"Invalid YAML in {path}: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise InputDocumentError(f"{path} must contain a mapping at the top level, got {type(data).__name__}")
        return data

    def read_text(self, path: str | Path) -> str:
        path = Path(path)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise InputDocumentError(f"File not found: {path}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise InputDocumentError(f"Cannot read {path}: {e}") from e


def resolve_text_block(data: dict, key: str, base_dir: Path, source) -> str:
    """
    Text for `key` ("scope_md" / "terms_md").

    `<key>_path` wins over inline `<key>`; the path is relative to base_dir
    (the YAML file's own directory), not the working directory.
    """
    ref = data.get(f"{key}_path")
    if ref:
        return source.read_text(Path(base_dir) / str(ref))
    inline = data.get(key)
    return "" if inline is None else str(inline)
