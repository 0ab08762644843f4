from pathlib import Path
from typing import Iterator, List


def ensure_dir(path: Path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _iter_records(path: Path, delimiter: str) -> Iterator[List[str]]:
    with path.open("r", newline="", encoding="utf-8-sig", errors="replace") as f:
        for line in f:
            yield line.rstrip("\r\n").split(delimiter)


def read_records(path, delimiter: str = ",") -> Iterator[List[str]]:
    """Split each line of a delimited text file on `delimiter` (no quoting).

    The existence check happens here, before the first line is read, so a
    missing file fails at the call site rather than on first iteration.
    Short or malformed lines are passed through for the caller to judge.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))
    return _iter_records(path, delimiter)
