import json

import pendulum
import pytest

from timelog.repository.record import RecordRepository
from timelog.repository.state import StateRepository
from timelog.service.error import (
    RecordParseError,
    RecordsNotFoundError,
    StateNotFoundError,
    StorageError,
)
from timelog.time import EPOCH

from memory_stores import make_record


# ─────────────────────────────────────────────────────────────
# Records
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def records(tmp_path) -> RecordRepository:
    return RecordRepository(tmp_path / "data" / "records.csv")


def test_load_missing_file(records):
    with pytest.raises(RecordsNotFoundError):
        records.load_all()


def test_append_writes_header_once(records):
    records.append(make_record("design", "2024-01-15", 3_600_000, "acme"))
    records.append(make_record("email", "2024-01-16", 600_000))

    assert records.path.read_text(encoding="utf-8") == (
        "task,duration_ms,date,project\n"
        "design,3600000,2024-01-15,acme\n"
        "email,600000,2024-01-16,\n"
    )
    assert records.load_all() == [
        make_record("design", "2024-01-15", 3_600_000, "acme"),
        make_record("email", "2024-01-16", 600_000),
    ]


def test_task_with_comma_and_quotes(records):
    record = make_record('fix "login", again', "2024-01-15")
    records.append(record)
    assert records.load_all() == [record]


def test_reads_three_field_rows(records):
    records.path.parent.mkdir(parents=True)
    records.path.write_text(
        "old task,120000,2023-12-01\nnew task,60000,2023-12-02,acme\n",
        encoding="utf-8",
    )

    loaded = records.load_all()

    assert loaded[0] == make_record("old task", "2023-12-01", 120_000)
    assert loaded[1]["project"] == "acme"


def test_save_all_rewrites_file(records):
    records.append(make_record("design", "2024-01-15"))
    records.save_all([make_record("review", "2024-01-17", 1_000, "acme")])

    assert records.load_all() == [make_record("review", "2024-01-17", 1_000, "acme")]
    assert records.path.read_text(encoding="utf-8").startswith("task,duration_ms")


@pytest.mark.parametrize(
    "line,reason",
    [
        ("only,two", "Invalid CSV record format"),
        ("task,abc,2024-01-15", "Invalid duration"),
        ("task,-5,2024-01-15", "Invalid duration"),
        ("task,100,15/01/2024", "Invalid date"),
    ],
)
def test_parse_errors_name_the_line(records, line, reason):
    records.path.parent.mkdir(parents=True)
    records.path.write_text(
        f"task,duration_ms,date,project\ngood,1,2024-01-15,\n{line}\n",
        encoding="utf-8",
    )

    with pytest.raises(RecordParseError) as excinfo:
        records.load_all()

    assert excinfo.value.line == 3
    assert excinfo.value.reason == reason
    assert str(excinfo.value) == f"Unable to read record on line 3: {reason}"


def test_get_all_projects(records):
    assert records.get_all_projects() == []
    records.append(make_record("a", "2024-01-15", project="zeta"))
    records.append(make_record("b", "2024-01-15"))
    records.append(make_record("c", "2024-01-16", project="acme"))
    records.append(make_record("d", "2024-01-16", project="zeta"))
    assert records.get_all_projects() == ["acme", "zeta"]


# ─────────────────────────────────────────────────────────────
# State
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def state_repo(tmp_path) -> StateRepository:
    return StateRepository(tmp_path / "data" / "state.yaml")


def test_state_round_trip(state_repo, t0):
    state = {"task": "design", "project": "acme", "started": t0, "accumulated_ms": 1_500}

    assert not state_repo.exists()
    state_repo.save(state)

    assert state_repo.exists()
    assert state_repo.load() == state


def test_paused_state_round_trip(state_repo):
    state = {"task": "design", "project": None, "started": None, "accumulated_ms": 60_000}
    state_repo.save(state)
    assert state_repo.load() == state


def test_state_delete(state_repo, t0):
    state_repo.save({"task": "t", "project": None, "started": t0, "accumulated_ms": 0})
    state_repo.delete()
    assert not state_repo.exists()
    with pytest.raises(StateNotFoundError):
        state_repo.load()


def test_legacy_active_state_file(state_repo, t0):
    state_repo.path.parent.mkdir(parents=True)
    state_repo.path.write_text(
        json.dumps({"task": "design", "timestamp": t0.isoformat(), "active": True}),
        encoding="utf-8",
    )

    assert state_repo.load() == {
        "task": "design",
        "project": None,
        "started": t0,
        "accumulated_ms": 0,
    }


def test_legacy_paused_state_file(state_repo):
    anchor = EPOCH.add(minutes=25)
    state_repo.path.parent.mkdir(parents=True)
    state_repo.path.write_text(
        json.dumps(
            {
                "task": "design",
                "timestamp": anchor.isoformat(),
                "active": False,
                "project": "acme",
            }
        ),
        encoding="utf-8",
    )

    state = state_repo.load()

    assert state["started"] is None
    assert state["accumulated_ms"] == 25 * 60_000
    assert state["project"] == "acme"


def test_loading_legacy_state_file_does_not_write(state_repo, t0):
    legacy = json.dumps({"task": "design", "timestamp": t0.isoformat(), "active": True})
    state_repo.path.parent.mkdir(parents=True)
    state_repo.path.write_text(legacy, encoding="utf-8")

    state = state_repo.load()
    assert state_repo.path.read_text(encoding="utf-8") == legacy

    state_repo.save(state)
    content = state_repo.path.read_text(encoding="utf-8")
    assert "timestamp" not in content
    assert "accumulated_ms" in content
    assert state_repo.load()["started"] == t0


def test_invalid_state_file(state_repo):
    state_repo.path.parent.mkdir(parents=True)
    state_repo.path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(StorageError):
        state_repo.load()


def test_saved_started_is_utc(state_repo):
    started = pendulum.datetime(2024, 1, 17, 10, tz="Europe/Brussels")
    state_repo.save({"task": "t", "project": None, "started": started, "accumulated_ms": 0})

    loaded = state_repo.load()

    assert loaded["started"] == started
    assert loaded["started"].timezone_name == "UTC"
