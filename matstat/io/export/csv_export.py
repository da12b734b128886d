from __future__ import annotations

from pathlib import Path
from typing import Optional, TypedDict, Union

from matstat.contracts.results import StatsResult

PathLike = Union[str, Path]

CSV_MIME_TYPE = "text/csv"


class ExportResult(TypedDict):
    """
    Generic description of an exported file.

    - content:  binary payload (e.g. for a StreamingResponse)
    - filename: suggested filename (with extension)
    - size:     length of content in bytes
    - mime_type: MIME type string (for HTTP headers)
    - path:     filesystem path if the export was written to disk
    """
    content: bytes
    filename: str
    size: int
    mime_type: str
    path: Optional[Path]


def _ensure_extension(name: str, ext: str) -> str:
    ext = ext.lstrip(".").lower()
    if not name.lower().endswith("." + ext):
        return f"{name}.{ext}"
    return name


def _normalize_dest_path(dest: Optional[PathLike], filename: str) -> Optional[Path]:
    """
    Normalize destination path.

    - If dest is None: no on-disk write, caller just gets bytes.
    - If dest is a directory: append filename.
    - If dest is a file path: use that path as-is (ignore filename).
    """
    if dest is None:
        return None

    p = Path(dest)
    if p.is_dir() or (not p.exists() and str(p).endswith(("/", "\\"))):
        return p / filename
    return p


def export_stats_to_csv(
    result: StatsResult,
    *,
    filename: Optional[str] = None,
    dest: Optional[PathLike] = None,
) -> ExportResult:
    """Serialize ``result`` as CSV with columns ``index,average,median``."""

    name = filename or f"{result.axis}_stats"
    final_name = _ensure_extension(name, "csv")

    text = result.to_frame().to_csv(index=False, lineterminator="\n")
    content = text.encode("utf-8")

    path = _normalize_dest_path(dest, final_name)
    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    return ExportResult(
        content=content,
        filename=path.name if path is not None else final_name,
        size=len(content),
        mime_type=CSV_MIME_TYPE,
        path=path,
    )
