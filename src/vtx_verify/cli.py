import json
from pathlib import Path
import click
from vtx_core.protocol import DEFAULT_MAX_FILE_SIZE
from .logic import verify_file

@click.group()
def main():
    pass

@main.command("file")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--max-size", type=int, default=DEFAULT_MAX_FILE_SIZE, show_default=True)
def file_cmd(path: Path, max_size: int):
    result = verify_file(path, max_size)
    click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    if result["status"] != "PASS":
        raise SystemExit(1)

if __name__ == "__main__":
    main()
