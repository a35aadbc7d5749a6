"""YAML I/O utilities with consistent error handling."""

import logging
from pathlib import Path
from typing import Any, TypeVar, Union

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_yaml(
    path: Union[str, Path],
    default: T = None,
    *,
    encoding: str = "utf-8",
    log_errors: bool = True,
) -> Union[Any, T]:
    """
    Load YAML file with consistent error handling.

    Args:
        path: Path to YAML file
        default: Default value if file doesn't exist or is invalid
        encoding: File encoding (default: utf-8)
        log_errors: Whether to log errors (default: True)

    Returns:
        Parsed YAML data or default value
    """
    path = Path(path)

    if not path.exists():
        return default

    try:
        content = path.read_text(encoding=encoding).strip()
        if not content:
            return default
        data = yaml.safe_load(content)
        return default if data is None else data
    except (yaml.YAMLError, IOError) as e:
        if log_errors:
            logger.warning(f"Failed to load {path}: {e}")
        return default


def save_yaml(
    data: Any,
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    mkdir: bool = True,
) -> None:
    """
    Save data to YAML file, keeping key order and unicode.

    Args:
        data: Data to serialize
        path: Output file path
        encoding: File encoding (default: utf-8)
        mkdir: Create parent directories if needed (default: True)

    Raises:
        OSError: if the file cannot be written
    """
    path = Path(path)

    if mkdir:
        path.parent.mkdir(parents=True, exist_ok=True)

    content = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(content, encoding=encoding)
    tmp_path.replace(path)
