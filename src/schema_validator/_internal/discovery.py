"""Discovery of proposed schema files on disk."""

from pathlib import Path
from typing import Iterable, List, Set, Union


def ensure_leading_dot(extension: str) -> str:
    return extension if extension.startswith(".") else f".{extension}"


def parse_file_extensions(value: str) -> Set[str]:
    """Parse a comma-delimited extension list; the leading dot is optional.

    Extensions are lower-cased, matching is case-insensitive.
    """
    if not value or not value.strip():
        raise ValueError("File extension list must not be blank")
    extensions = {
        ensure_leading_dot(part.strip().lower())
        for part in value.split(",")
        if part.strip()
    }
    if not extensions:
        raise ValueError(f"No file extensions found in '{value}'")
    return extensions


def is_supported_file(path: Path, extensions: Iterable[str]) -> bool:
    name = path.name.lower()
    return path.is_file() and any(name.endswith(ext) for ext in extensions)


def discover_schema_files(schema_dir: Union[str, Path], extensions: Iterable[str]) -> List[Path]:
    """
    Recursively find schema files under `schema_dir`.

    Returns paths sorted for deterministic processing order.

    Raises:
        FileNotFoundError: if `schema_dir` is not an existing directory.
    """
    root = Path(schema_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Schema directory not found: {root}")
    extensions = [ext.lower() for ext in extensions]
    return sorted(path for path in root.rglob("*") if is_supported_file(path, extensions))
