from furthest_point import PointKind, find_max
from furthest_point.demo import run


def test_demo_runs_all_samples(capsys):
    run()
    out = capsys.readouterr().out
    assert "maximum: ( 3 4 ) (norm 5)" in out
    assert "maximum: ( 5 0 )" in out
    assert "no maximum (first_record_failed)" in out


def test_string_sources_are_accepted_directly():
    result = find_max("(0 0 1)\n(0 2 0)", PointKind.from_names("long", 3))
    assert result.maximum.values() == (0, 2, 0)
    assert result.source == "<string>"
