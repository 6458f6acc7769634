import json
import os
import random
import subprocess
import sys
from pathlib import Path

from click.testing import CliRunner

from make_sample import generate_file, random_program
from vtx_core.protocol import LEGACY_SPACE, MIN_PROGRAMS_IN_GROUP, PREFIX_LEN, PROGRAM_RECORD_LEN
from vtx_prog.cli import main as vtxprog
from vtx_prog.codec import decode_programs, encode_programs
from vtx_verify.cli import main as verify
from vtx_verify.logic import verify_file

REPO = Path(__file__).resolve().parents[1]


def run(cmd, cwd):
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join([str(REPO / "src"), env.get("PYTHONPATH", "")])
    return subprocess.run(cmd, cwd=cwd, shell=True, check=False, capture_output=True, text=True, env=env)


def test_inspect_lists_slots(tmp_path, program):
    path = tmp_path / "Blues.vtxprog"
    path.write_bytes(encode_programs([program, program]))
    r = CliRunner().invoke(vtxprog, ["inspect", str(path)])
    assert r.exit_code == 0, r.output
    lines = r.output.splitlines()
    assert lines[0] == "Blues: 2 programs"
    assert "Crunch" in lines[1] and "VOX_AC30TB" in lines[1] and "TUBE_OD" in lines[1]


def test_inspect_rejects_foreign_file(tmp_path):
    path = tmp_path / "x.vtxprog"
    path.write_bytes(b"\x00" * 64)
    r = CliRunner().invoke(vtxprog, ["inspect", str(path)])
    assert r.exit_code == 1
    assert "FATAL: does not appear to be a VTXPROG file." in r.output


def test_inspect_honours_size_limit(tmp_path, program):
    path = tmp_path / "x.vtxprog"
    path.write_bytes(encode_programs([program] * 4))
    r = CliRunner().invoke(vtxprog, ["--max-size", "100", "inspect", str(path)])
    assert r.exit_code == 1
    assert "too big" in r.output


def test_export_writes_parquet(tmp_path, program):
    path = tmp_path / "Blues.vtxprog"
    path.write_bytes(encode_programs([program]))
    out = tmp_path / "programs.parquet"
    r = CliRunner().invoke(vtxprog, ["export", str(path), str(out)])
    assert r.exit_code == 0, r.output
    assert out.exists() and out.stat().st_size > 0


def test_normalize_rewrites_legacy_bytes(tmp_path):
    legacy = generate_file(tmp_path, "Legacy", count=3, legacy=True)
    out = tmp_path / "clean.vtxprog"
    r = CliRunner().invoke(vtxprog, ["normalize", str(legacy), str(out)])
    assert r.exit_code == 0, r.output
    assert "rewritten" in r.output
    assert out.read_bytes() != legacy.read_bytes()
    assert decode_programs(out.read_bytes()) == decode_programs(legacy.read_bytes())

    again = tmp_path / "again.vtxprog"
    r = CliRunner().invoke(vtxprog, ["normalize", str(out), str(again)])
    assert "unchanged" in r.output
    assert again.read_bytes() == out.read_bytes()


def test_write_failures_report_the_os_reason(tmp_path, program):
    path = tmp_path / "Blues.vtxprog"
    path.write_bytes(encode_programs([program]))
    blocker = tmp_path / "blocker"
    blocker.write_text("a regular file, not a directory")

    for cmd in ("normalize", "export"):
        r = CliRunner().invoke(vtxprog, [cmd, str(path), str(blocker / "out")])
        assert r.exit_code == 1
        assert r.output.startswith("FATAL: ")
        assert "see logs" not in r.output
        assert len(r.output.strip()) > len("FATAL:")

    r = CliRunner().invoke(vtxprog, ["normalize", str(path), str(blocker / "out")])
    assert "blocker" in r.output


def test_blank_writes_default_group(tmp_path):
    r = CliRunner().invoke(vtxprog, ["blank", str(tmp_path), "--name", "Empty"])
    assert r.exit_code == 0, r.output
    data = (tmp_path / "Empty.vtxprog").read_bytes()
    assert len(data) == PREFIX_LEN + PROGRAM_RECORD_LEN * MIN_PROGRAMS_IN_GROUP


def test_verify_pass_and_canonical_flag(tmp_path):
    clean = generate_file(tmp_path / "a", "Clean", count=2)
    legacy = generate_file(tmp_path / "b", "Clean", count=2, legacy=True)

    result = verify_file(clean)
    assert result == {"status": "PASS", "error_count": 0, "errors": [], "programs": 2, "canonical": True}
    assert verify_file(legacy)["canonical"] is False


def test_verify_error_codes(tmp_path, program):
    assert verify_file(tmp_path / "nope.vtxprog")["errors"][0]["code"] == "E_LAYOUT_MISSING"

    path = tmp_path / "x.vtxprog"
    path.write_bytes(b"RIFF" + bytes(40))
    assert verify_file(path)["errors"][0]["code"] == "E_PREFIX_NOT_RECOGNIZED"

    data = encode_programs([program])
    path.write_bytes(data + b"\x00" * 5)
    err = verify_file(path)["errors"][0]
    assert err["code"] == "E_INVALID_MESSAGE"
    assert err["offset"] == PREFIX_LEN + PROGRAM_RECORD_LEN

    b = bytearray(data)
    b[PREFIX_LEN + 18] = 0x40
    path.write_bytes(bytes(b))
    err = verify_file(path)["errors"][0]
    assert err["code"] == "E_UNRECOGNIZED_VALUE"
    assert (err["parameter"], err["value"]) == ("AmpModel", 0x40)

    assert verify_file(path, max_size=10)["errors"][0]["code"] == "E_FILE_TOO_LARGE"


def test_verify_reports_unreadable_file(tmp_path, monkeypatch):
    clean = generate_file(tmp_path, "Clean", count=1)

    def refuse(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_bytes", refuse)
    result = verify_file(clean)
    assert result["status"] == "FAIL"
    err = result["errors"][0]
    assert err["code"] == "E_READ_FAILED"
    assert "Permission denied" in err["detail"]


def test_samples_never_store_space_in_raw_dials():
    for seed in range(200):
        p = random_program(random.Random(seed), "Any")
        assert LEGACY_SPACE not in (p.pedal1_dial2, p.pedal2_dial2, p.reverb_pedal_dial3)


def test_non_legacy_samples_are_canonical(tmp_path):
    for seed in range(20):
        path = generate_file(tmp_path / str(seed), "Clean", count=11, seed=seed)
        assert verify_file(path)["canonical"] is True


def test_verify_cli_prints_json(tmp_path):
    clean = generate_file(tmp_path, "Clean", count=1)
    r = CliRunner().invoke(verify, ["file", str(clean)])
    assert r.exit_code == 0, r.output
    assert json.loads(r.output)["status"] == "PASS"

    clean.write_bytes(b"garbage" * 10)
    r = CliRunner().invoke(verify, ["file", str(clean)])
    assert r.exit_code == 1
    assert json.loads(r.output)["status"] == "FAIL"


def test_sample_tool_and_module_entry_points(tmp_path):
    out_dir = tmp_path / "samples"
    r = run(f'"{sys.executable}" tools/make_sample.py "{out_dir}" Demo --count 4', cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout

    sample = out_dir / "Demo.vtxprog"
    assert sample.stat().st_size == PREFIX_LEN + PROGRAM_RECORD_LEN * 4

    r = run(f'"{sys.executable}" -m vtx_prog.cli inspect "{sample}"', cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout
    assert r.stdout.startswith("Demo: 4 programs")

    # Corrupt the prefix and ensure failure
    r = run(f'"{sys.executable}" scripts/corrupt_one_byte.py "{sample}"', cwd=REPO)
    assert r.returncode == 0, r.stderr + r.stdout
    r = run(f'"{sys.executable}" -m vtx_verify.cli file "{sample}"', cwd=REPO)
    assert r.returncode != 0
    assert "E_PREFIX_NOT_RECOGNIZED" in r.stdout
