"""VTXPROG Librarian - inspect, export and rewrite .vtxprog preset files."""
from __future__ import annotations

from pathlib import Path

import click

from vtx_core.protocol import DEFAULT_MAX_FILE_SIZE
from vtx_prog.codec import VtxProgFile
from vtx_prog.library import (
    blank_group,
    export_parquet,
    failure_reason,
    load_file,
    read_bytes_limited,
    save_group,
)


def _fail(e: Exception) -> None:
    # Fail closed, with a single-line reason.
    click.echo(f"FATAL: {failure_reason(e)}", err=True)
    raise SystemExit(1)


def _slot_line(slot: int, program) -> str:
    p1 = program.pedal1_type.name if program.pedal1_enabled else "-"
    p2 = program.pedal2_type.name if program.pedal2_enabled else "-"
    rv = program.reverb_pedal_type.name if program.reverb_pedal_enabled else "-"
    return (
        f"{slot:>3}  {program.program_name.text:<16}  {program.amp_model.name:<18}"
        f"  gain {program.gain.display:>4}  p1 {p1:<12}  p2 {p2:<12}  rev {rv}"
    )


@click.group()
@click.option(
    "--max-size",
    type=int,
    default=DEFAULT_MAX_FILE_SIZE,
    show_default=True,
    help="Reject input files larger than this many bytes",
)
@click.pass_context
def main(ctx: click.Context, max_size: int) -> None:
    """Work with VOX ToneRoom .vtxprog program files."""
    ctx.obj = {"max_size": max_size}


@main.command("inspect")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def inspect_cmd(ctx: click.Context, file: Path) -> None:
    """List the programs in FILE, one slot per line."""
    try:
        group = load_file(file, ctx.obj["max_size"])
    except Exception as e:
        _fail(e)
    click.echo(f"{group.name}: {len(group.programs)} programs")
    for slot, program in enumerate(group.programs):
        click.echo(_slot_line(slot, program))


@main.command("export")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def export_cmd(ctx: click.Context, file: Path, out: Path) -> None:
    """Write the programs in FILE as a parquet table OUT."""
    try:
        group = load_file(file, ctx.obj["max_size"])
        export_parquet(group.programs, out)
    except Exception as e:
        _fail(e)
    click.echo(f"PASS: {len(group.programs)} programs written to {out}")


@main.command("normalize")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def normalize_cmd(ctx: click.Context, file: Path, out: Path) -> None:
    """Re-encode FILE canonically into OUT (legacy bytes become 0/1)."""
    try:
        raw = read_bytes_limited(file, ctx.obj["max_size"])
        encoded = VtxProgFile.read_from_in_vtxprog_format(raw).write_to_in_vtxprog_format()
        out.write_bytes(encoded)
    except Exception as e:
        _fail(e)
    changed = "unchanged" if encoded == raw else "rewritten"
    click.echo(f"PASS: {out} ({changed})")


@main.command("blank")
@click.argument("directory", type=click.Path(file_okay=False, path_type=Path))
@click.option("--name", default=None, help="Group name; defaults to unknown-<date>")
def blank_cmd(directory: Path, name: str | None) -> None:
    """Write a group of default programs into DIRECTORY."""
    directory.mkdir(parents=True, exist_ok=True)
    out = save_group(blank_group(name), directory)
    click.echo(f"PASS: {out}")


if __name__ == "__main__":
    main()
