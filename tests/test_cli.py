from types import SimpleNamespace

import pytest

import furthest_point.__main__ as cli


def test_main_scans_each_job_and_reports(tmp_path, capsys):
    ints = tmp_path / "ints.txt"
    ints.write_text("(1 2)\n(3 4)\n", encoding="utf-8")
    doubles = tmp_path / "doubles.txt"
    doubles.write_text("( 0.5 )\n( -1.5 )\n", encoding="utf-8")

    status = cli.main([f"int:2:{ints}", f"double:1:{doubles}"])

    assert status == 0
    out = capsys.readouterr().out
    assert out == (
        f"the point furthest from ( 0 0 ) in {ints} is ( 3 4 )\n\n"
        f"the point furthest from ( 0.0 ) in {doubles} is ( -1.5 )\n\n"
    )


def test_main_passes_encoding_override(tmp_path, monkeypatch):
    seen = []

    def _run_jobs(jobs, config=None):
        seen.append((jobs, config))
        return [SimpleNamespace(found=True, source=str(job.path)) for job in jobs]

    monkeypatch.setattr(cli, "run_jobs", _run_jobs)

    status = cli.main(["--encoding", "latin-1", f"long:3:{tmp_path / 'a.txt'}"])

    assert status == 0
    jobs, config = seen[0]
    assert [str(job) for job in jobs] == [f"long:3:{tmp_path / 'a.txt'}"]
    assert config.encoding == "latin-1"


@pytest.mark.parametrize("strict, expected", [(False, 0), (True, 1)])
def test_strict_fails_when_a_file_has_no_maximum(tmp_path, strict, expected):
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    argv = [f"int:2:{empty}"] + (["--strict"] if strict else [])

    assert cli.main(argv) == expected


def test_bad_job_spec_is_an_argument_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["int:zero:points.txt"])
    assert exc.value.code == 2
    assert "dimension must be an integer" in capsys.readouterr().err


def test_unknown_encoding_is_an_argument_error(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("(1 1)\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main([f"int:2:{path}", "--encoding", "nope"])
    assert exc.value.code == 2
    assert "unknown encoding: nope" in capsys.readouterr().err
