"""Preset library: program groups on disk, bundled manifests, table export."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from warnings import warn

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from vtx_core.errors import InvalidMessage, MessageParseError, PrefixNotRecognized
from vtx_core.ids import name_key, program_id
from vtx_core.program import Program
from vtx_core.protocol import (
    DEFAULT_MAX_FILE_SIZE,
    MANIFEST_NAME,
    MIN_PROGRAMS_IN_GROUP,
    VTXPROG_SUFFIX,
)
from vtx_prog.codec import VtxProgFile, encode_program


class FileTooLarge(ValueError):
    def __init__(self, path: Path, size: int, limit: int):
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(f"{path.name} is too big ({size} bytes), max {limit} bytes")


@dataclass
class ProgramGroup:
    """A named, ordered set of programs as shown in one library entry."""

    name: str | None
    programs: list[Program] = field(default_factory=list)

    def to_file(self) -> VtxProgFile:
        return VtxProgFile(tuple(self.programs))


def display_name(filename: str | Path) -> str:
    """Strip directory and the .vtxprog suffix (any case)."""
    name = Path(filename).name
    if name.lower().endswith(VTXPROG_SUFFIX):
        name = name[: -len(VTXPROG_SUFFIX)]
    return name


def export_filename(name: str | None, today: date | None = None) -> str:
    if not name:
        today = today or date.today()
        name = f"unknown-{today.year}-{today.month:02d}-{today.day:02d}"
    return name + VTXPROG_SUFFIX


def blank_group(name: str | None = None) -> ProgramGroup:
    return ProgramGroup(name, [Program.default() for _ in range(MIN_PROGRAMS_IN_GROUP)])


def read_bytes_limited(path: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> bytes:
    path = Path(path)
    size = path.stat().st_size
    if size > max_size:
        raise FileTooLarge(path, size, max_size)
    return path.read_bytes()


def load_file(path: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> ProgramGroup:
    """Decode a .vtxprog file into a group named after the file."""
    path = Path(path)
    vtx = VtxProgFile.read_from_in_vtxprog_format(read_bytes_limited(path, max_size))
    return ProgramGroup(display_name(path), list(vtx.programs))


def save_group(group: ProgramGroup, directory: Path) -> Path:
    """Write ``group`` into ``directory`` using its export filename."""
    out = Path(directory) / export_filename(group.name)
    out.write_bytes(group.to_file().write_to_in_vtxprog_format())
    return out


def load_manifest(directory: Path, max_size: int = DEFAULT_MAX_FILE_SIZE) -> list[ProgramGroup]:
    """Load every file listed in ``directory/vtxprog-manifest.json``.

    Each listed file is an independent import: one that cannot be decoded is
    skipped with a warning and does not affect the others.
    """
    directory = Path(directory)
    manifest_path = directory / MANIFEST_NAME
    if not manifest_path.exists():
        raise FileNotFoundError(f"Manifest missing: {manifest_path}")

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    if not isinstance(manifest, dict):
        raise ValueError(f"Manifest must be a JSON object: {manifest_path}")
    files = manifest.get("files", [])
    if not isinstance(files, list):
        raise ValueError(f"Manifest 'files' must be a list: {manifest_path}")

    groups: list[ProgramGroup] = []
    for file_name in files:
        if not isinstance(file_name, str) or not file_name:
            warn(f"Skipping manifest entry {file_name!r}: not a file name")
            continue
        try:
            groups.append(load_file(directory / file_name, max_size))
        except (MessageParseError, FileTooLarge, OSError) as e:
            warn(f"Skipping preset file {file_name}: {failure_reason(e)}")
    return groups


def describe_error(exc: BaseException) -> str:
    """User-facing reason for a failed import."""
    if isinstance(exc, PrefixNotRecognized):
        return "does not appear to be a VTXPROG file."
    if isinstance(exc, (InvalidMessage, FileTooLarge)):
        return str(exc)
    if isinstance(exc, MessageParseError):
        return f"malformed file: {exc}"
    return "see logs for details."


def failure_reason(exc: BaseException) -> str:
    """Single-line reason for a command-line failure.

    Decode problems get the same wording as an import alert. Anything else,
    such as an unwritable output path, is reported as it was raised.
    """
    if isinstance(exc, (MessageParseError, FileTooLarge)):
        return describe_error(exc)
    return str(exc) or type(exc).__name__


# --- Tabular export ---

_ENUM_COLUMNS = (
    "amp_model",
    "tube_bias",
    "amp_class",
    "pedal1_type",
    "pedal2_type",
    "reverb_pedal_type",
)
_BOOL_COLUMNS = (
    "bright_cap",
    "low_cut",
    "mid_boost",
    "pedal1_enabled",
    "pedal2_enabled",
    "reverb_pedal_enabled",
)


def _schema() -> pa.Schema:
    cols = [
        ("slot", pa.int32()),
        ("program_id", pa.string()),
        ("name_key", pa.string()),
    ]
    for name, value in Program.default().to_record().items():
        if name == "program_name" or name in _ENUM_COLUMNS:
            cols.append((name, pa.string()))
        elif name in _BOOL_COLUMNS:
            cols.append((name, pa.bool_()))
        else:
            cols.append((name, pa.int32()))
    return pa.schema(cols)


def programs_table(programs: list[Program]) -> pd.DataFrame:
    """One row per slot with flattened program fields."""
    rows: list[dict] = []
    for slot, program in enumerate(programs):
        row = {
            "slot": slot,
            "program_id": program_id(encode_program(program)),
            "name_key": name_key(program.program_name.text),
        }
        row.update(program.to_record())
        rows.append(row)
    return pd.DataFrame(rows, columns=_schema().names)


def export_parquet(programs: list[Program], out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df = programs_table(programs)
    if df.empty:
        table = _schema().empty_table()
    else:
        table = pa.Table.from_pandas(df, schema=_schema(), preserve_index=False)
    pq.write_table(table, out_path)
    return out_path
