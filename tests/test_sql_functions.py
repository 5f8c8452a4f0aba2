# tests/test_sql_functions.py
from __future__ import annotations

import json
import sqlite3

import pytest

from soundalike.sql import functions as F
from soundalike.utils import SettingsParseError

"""
Tests: sql/functions.py

Does: Register the comparisons on an in-memory SQLite database and check results,
      argument validation (NULL / numbers / arity), blob decoding and settings handling.
"""


# ──────────────────────────────────────────────────────────────────────────────
# Fixtures
# ──────────────────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def _packaged_settings(monkeypatch):
    """Read settings from the packaged data/ dir."""
    monkeypatch.delenv("SOUNDALIKE_DATA_DIR", raising=False)


@pytest.fixture
def conn():
    connection = sqlite3.connect(":memory:")
    yield connection
    connection.close()


# ──────────────────────────────────────────────────────────────────────────────
# Registration with the packaged config
# ──────────────────────────────────────────────────────────────────────────────


def test_register_functions_default_names(conn):
    names = F.register_functions(conn)
    assert names == ["levenshtein", "double_metaphone_eq", "jaro_winkler", "dice"]


def test_registered_functions_compute_in_sql(conn):
    F.register_functions(conn)
    row = conn.execute(
        "SELECT double_metaphone_eq('mère', 'mer'),"
        " double_metaphone_eq('bloat', 'float'),"
        " levenshtein('kitten', 'sitting'),"
        " dice('night', 'nacht')"
    ).fetchone()
    assert row == (1, 0, 3, pytest.approx(0.25))

    jw = conn.execute("SELECT jaro_winkler('MARTHA', 'MARHTA')").fetchone()[0]
    assert jw == pytest.approx(0.9611, abs=1e-4)


def test_sounds_like_filter_over_table(conn):
    F.register_functions(conn)
    conn.execute("CREATE TABLE people (name TEXT NOT NULL)")
    conn.executemany(
        "INSERT INTO people(name) VALUES (?)",
        [("Thomas",), ("Tomas",), ("Smith",), ("Knight",), ("Nite",)],
    )
    rows = conn.execute(
        "SELECT name FROM people WHERE double_metaphone_eq(name, ?) ORDER BY name",
        ("Thomas",),
    ).fetchall()
    assert [r[0] for r in rows] == ["Thomas", "Tomas"]

    rows = conn.execute(
        "SELECT name FROM people WHERE double_metaphone_eq(name, 'Night') ORDER BY name"
    ).fetchall()
    assert [r[0] for r in rows] == ["Knight", "Nite"]


def test_blob_arguments_are_decoded(conn):
    F.register_functions(conn)
    value = conn.execute("SELECT levenshtein(?, ?)", ("mère".encode("utf-8"), "mere")).fetchone()[0]
    assert value == 1


# ──────────────────────────────────────────────────────────────────────────────
# Argument validation
# ──────────────────────────────────────────────────────────────────────────────


def test_null_and_numeric_arguments_fail(conn):
    F.register_functions(conn)
    with pytest.raises(sqlite3.OperationalError):
        conn.execute("SELECT levenshtein(NULL, 'abc')").fetchone()
    with pytest.raises(sqlite3.OperationalError):
        conn.execute("SELECT dice(12, 'abc')").fetchone()


def test_wrong_arity_is_rejected_by_sqlite(conn):
    F.register_functions(conn)
    with pytest.raises(sqlite3.OperationalError):
        conn.execute("SELECT levenshtein('abc')").fetchone()
    with pytest.raises(sqlite3.OperationalError):
        conn.execute("SELECT jaro_winkler('a', 'b', 0.2)").fetchone()


def test_decode_arg_errors():
    with pytest.raises(F.FunctionArgumentError, match="non-NULL"):
        F._decode_arg(None, "utf-8")
    with pytest.raises(F.FunctionArgumentError, match="string"):
        F._decode_arg(3.5, "utf-8")
    with pytest.raises(F.FunctionArgumentError, match="decode"):
        F._decode_arg(b"\xff\xfe", "utf-8")
    assert F._decode_arg(b"m\xe8re", "latin-1") == "mère"


# ──────────────────────────────────────────────────────────────────────────────
# Config handling
# ──────────────────────────────────────────────────────────────────────────────


def test_explicit_config_renames_and_sets_encoding(conn):
    names = F.register_functions(
        conn,
        config={
            "encoding": "latin-1",
            "functions": {"sounds_like": "is_phonetic_match"},
        },
    )
    assert names == ["sounds_like"]
    value = conn.execute("SELECT sounds_like(?, 'mer')", ("mère".encode("latin-1"),)).fetchone()[0]
    assert value == 1
    with pytest.raises(sqlite3.OperationalError):
        conn.execute("SELECT levenshtein('a', 'b')").fetchone()


@pytest.mark.parametrize(
    "config",
    [
        {},
        {"functions": {}},
        {"functions": {"lev": "no_such_callable"}},
        {"functions": {"lev": "levenshtein_distance"}, "encoding": "klingon-8"},
    ],
)
def test_invalid_explicit_config(conn, config):
    with pytest.raises(ValueError):
        F.register_functions(conn, config=config)


def test_load_sql_config_from_data_dir(tmp_path, conn, monkeypatch):
    (tmp_path / "sql_functions.json").write_text(
        json.dumps({"functions": {"edit": "levenshtein_distance"}}), encoding="utf-8"
    )
    monkeypatch.setenv("SOUNDALIKE_DATA_DIR", str(tmp_path))
    cfg = F.load_sql_config()
    assert cfg == {
        "encoding": "utf-8",
        "deterministic": True,
        "functions": {"edit": "levenshtein_distance"},
    }
    assert F.register_functions(conn) == ["edit"]
    assert conn.execute("SELECT edit('abc', 'abd')").fetchone()[0] == 1


def test_load_sql_config_rejects_bad_file(tmp_path, monkeypatch):
    (tmp_path / "sql_functions.json").write_text(
        json.dumps({"functions": {"edit": "soundex"}}), encoding="utf-8"
    )
    monkeypatch.setenv("SOUNDALIKE_DATA_DIR", str(tmp_path))
    with pytest.raises(SettingsParseError, match="soundex"):
        F.load_sql_config()


def test_registration_debug_topic(conn, monkeypatch, capsys):
    from soundalike.utils import log as L

    monkeypatch.setenv("SOUNDALIKE_DEBUG_TOPICS", "sql")
    L.reload_topics()
    try:
        F.register_functions(conn, config={"functions": {"dice": "dice_coefficient"}})
    finally:
        monkeypatch.delenv("SOUNDALIKE_DEBUG_TOPICS")
        L.reload_topics()
    assert "registered dice() → dice_coefficient" in capsys.readouterr().err
