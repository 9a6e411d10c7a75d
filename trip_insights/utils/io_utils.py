"""Reading trip JSON documents and writing summary reports."""

from pathlib import Path
from typing import Any, Dict
import orjson

# Reports are read by people as well as tools
REPORT_OPTIONS = orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE | orjson.OPT_SERIALIZE_NUMPY


def ensure_dir(path: str | Path) -> Path:
    """Create directory (and parents) if missing and return it as a Path."""
    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def decode_json(payload: str | bytes) -> Any:
    """Decode a JSON document held in memory.

    Raises:
        orjson.JSONDecodeError: If payload is not valid JSON
    """
    return orjson.loads(payload)


def load_json(file_path: str | Path) -> Any:
    """Read and decode a JSON file.

    Raises:
        orjson.JSONDecodeError: If the file is not valid JSON
        OSError: If the file cannot be read
    """
    return decode_json(Path(file_path).read_bytes())


def write_report(report: Dict[str, Any], file_path: str | Path) -> Path:
    """Write an insight or comparison payload as indented JSON.

    Args:
        report: camelCase summary payload
        file_path: Output file; parent directories are created

    Returns:
        Path written
    """
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)
    path_obj.write_bytes(orjson.dumps(report, option=REPORT_OPTIONS))
    return path_obj
