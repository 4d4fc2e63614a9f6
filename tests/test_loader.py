import logging

import pytest

from fars.data.loader import YearResult, load_years, loaded_frames

from conftest import write_accidents


def _warnings(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


def test_load_years_projects_month_and_year(fars_dir):
    (result,) = load_years([2013])

    assert result.ok
    assert list(result.data.columns) == ["MONTH", "year"]
    assert len(result.data) == 6
    assert set(result.data["year"]) == {2013}


def test_string_year_is_tagged_as_int(fars_dir):
    (result,) = load_years(["2014"])
    assert result.year == "2014"
    assert set(result.data["year"]) == {2014}


def test_missing_year_is_isolated(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")

    results = load_years([2013, 9999])

    assert [r.year for r in results] == [2013, 9999]
    assert results[0].ok
    assert not results[1].ok
    assert results[1].data is None
    assert "accident_9999.csv.bz2" in results[1].error

    warnings = _warnings(caplog)
    assert len(warnings) == 1
    assert "9999" in warnings[0].getMessage()


def test_uncoercible_year_is_isolated(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")

    results = load_years(["abc", 2014])

    assert not results[0].ok
    assert results[1].ok
    assert [w.getMessage() for w in _warnings(caplog)] == ["invalid year: abc"]


def test_unparseable_and_monthless_files_are_isolated(fars_dir, caplog):
    caplog.set_level(logging.WARNING, logger="fars")
    (fars_dir / "accident_2015.csv.bz2").write_bytes(b"garbage")
    write_accidents(fars_dir, 2016, [{"STATE": 1, "LATITUDE": 30.0}])

    results = load_years([2015, 2016, 2013])

    assert [r.ok for r in results] == [False, False, True]
    assert len(_warnings(caplog)) == 2


def test_order_follows_input(fars_dir):
    results = load_years([2014, 9999, 2013])
    assert [r.year for r in results] == [2014, 9999, 2013]
    assert [set(r.data["year"]) for r in results if r.ok] == [{2014}, {2013}]


def test_scalar_year_is_accepted(fars_dir):
    results = load_years(2013)
    assert len(results) == 1 and results[0].ok


def test_loaded_frames_drops_failures(fars_dir):
    frames = loaded_frames(load_years([9999, 2013, 2014]))
    assert [len(f) for f in frames] == [6, 4]


def test_year_result_ok():
    assert not YearResult(year=2013, error="missing").ok


def test_data_dir(fars_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path.parent)
    results = load_years([2013, 2014], data_dir=fars_dir)
    assert all(r.ok for r in results)
