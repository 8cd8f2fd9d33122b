import json

import pytest

from timelog.repository.plugin import PluginRepository
from timelog.service.error import (
    AmbiguousPluginError,
    MalformedResponseError,
    NoPluginsError,
    PluginConfigError,
    PluginExitError,
    PluginNotFoundError,
)
from timelog.service.plugin import (
    build_request,
    execute_plugin,
    parse_response,
    select_plugin,
    serialize_request,
)

from memory_stores import make_record

ECHO_PLUGIN = """
import json
import sys

request = json.load(sys.stdin)
json.dump(
    {
        "success": True,
        "uploaded_count": len(request["records"]),
        "message": " ".join([request["period"]] + sys.argv[1:]),
        "errors": [],
    },
    sys.stdout,
)
"""


@pytest.fixture
def registry(tmp_path) -> PluginRepository:
    (tmp_path / "plugins").mkdir(exist_ok=True)
    return PluginRepository(tmp_path / "plugins")


@pytest.fixture
def request_payload():
    return build_request(
        [
            make_record("design", "2024-01-15", 3_600_000, "acme"),
            make_record("email", "2024-01-16", 600_000),
        ],
        "thisweek",
        {"token": "abc"},
    )


# ─────────────────────────────────────────────────────────────
# Registry
# ─────────────────────────────────────────────────────────────


def test_registry_lists_only_prefixed_executables(registry, write_plugin):
    write_plugin("jira", "pass")
    write_plugin("tempo", "pass")
    write_plugin("draft", "pass", executable=False)
    (registry.path / "timelog-jira.json").write_text("{}", encoding="utf-8")
    (registry.path / "other-tool").write_text("", encoding="utf-8")

    assert registry.list_plugins() == ["jira", "tempo"]


def test_registry_missing_directory(tmp_path):
    assert PluginRepository(tmp_path / "missing").list_plugins() == []


def test_resolve_config(registry):
    (registry.path / "timelog-jira.json").write_text(
        '{"url": "https://jira.example.com"}', encoding="utf-8"
    )
    assert registry.resolve_config("jira") == {"url": "https://jira.example.com"}


def test_resolve_config_absent_is_empty(registry):
    assert registry.resolve_config("jira") == {}


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_resolve_config_rejects_invalid(registry, content):
    (registry.path / "timelog-jira.json").write_text(content, encoding="utf-8")
    with pytest.raises(PluginConfigError):
        registry.resolve_config("jira")


# ─────────────────────────────────────────────────────────────
# Selection
# ─────────────────────────────────────────────────────────────


def test_select_named_plugin(registry, write_plugin):
    write_plugin("jira", "pass")
    write_plugin("tempo", "pass")
    assert select_plugin(registry, "tempo") == "tempo"


def test_select_unknown_plugin(registry, write_plugin):
    write_plugin("jira", "pass")
    with pytest.raises(PluginNotFoundError) as excinfo:
        select_plugin(registry, "tempo")
    assert "tempo" in str(excinfo.value)


def test_select_single_plugin_by_default(registry, write_plugin):
    write_plugin("jira", "pass")
    assert select_plugin(registry, None) == "jira"


def test_select_without_plugins(registry):
    with pytest.raises(NoPluginsError):
        select_plugin(registry, None)


def test_select_with_several_plugins(registry, write_plugin):
    write_plugin("jira", "pass")
    write_plugin("tempo", "pass")
    with pytest.raises(AmbiguousPluginError) as excinfo:
        select_plugin(registry, None)
    assert excinfo.value.names == ["jira", "tempo"]


# ─────────────────────────────────────────────────────────────
# Wire format
# ─────────────────────────────────────────────────────────────


def test_serialize_request(request_payload):
    assert json.loads(serialize_request(request_payload)) == {
        "records": [
            {
                "task": "design",
                "duration_ms": 3_600_000,
                "date": "2024-01-15",
                "project": "acme",
            },
            {
                "task": "email",
                "duration_ms": 600_000,
                "date": "2024-01-16",
                "project": None,
            },
        ],
        "period": "thisweek",
        "config": {"token": "abc"},
    }


def test_parse_response_without_count():
    response = parse_response(b'{"success": false, "message": "nope", "errors": ["a"]}')
    assert response == {
        "success": False,
        "uploaded_count": None,
        "message": "nope",
        "errors": ["a"],
    }


@pytest.mark.parametrize(
    "output",
    [
        b"not json",
        b"[]",
        b'{"message": "m", "errors": []}',
        b'{"success": "yes", "message": "m", "errors": []}',
        b'{"success": true, "errors": []}',
        b'{"success": true, "message": "m", "errors": [1]}',
        b'{"success": true, "message": "m", "errors": [], "uploaded_count": -1}',
        b'{"success": true, "message": "m", "errors": [], "uploaded_count": true}',
    ],
)
def test_parse_response_rejects_malformed(output):
    with pytest.raises(MalformedResponseError):
        parse_response(output)


# ─────────────────────────────────────────────────────────────
# Execution
# ─────────────────────────────────────────────────────────────


def test_execute_success(registry, write_plugin, request_payload):
    write_plugin("echo", ECHO_PLUGIN)

    response = execute_plugin(registry, "echo", request_payload)

    assert response["success"] is True
    assert response["uploaded_count"] == 2
    assert response["message"] == "thisweek"
    assert response["errors"] == []


def test_execute_dry_run_passes_flag(registry, write_plugin, request_payload):
    write_plugin("echo", ECHO_PLUGIN)
    response = execute_plugin(registry, "echo", request_payload, dry_run=True)
    assert response["message"] == "thisweek --dry-run"


def test_execute_reported_failure_is_returned(registry, write_plugin, request_payload):
    write_plugin(
        "fail",
        """
        import json, sys
        sys.stdin.read()
        print(json.dumps({"success": False, "message": "auth failed", "errors": ["401"]}))
        """,
    )

    response = execute_plugin(registry, "fail", request_payload)

    assert response["success"] is False
    assert response["message"] == "auth failed"
    assert response["errors"] == ["401"]


def test_execute_nonzero_exit(registry, write_plugin, request_payload):
    write_plugin(
        "crash",
        """
        import json, sys
        sys.stdin.read()
        print(json.dumps({"success": True, "message": "ok", "errors": []}))
        sys.stderr.write("boom")
        sys.exit(3)
        """,
    )

    with pytest.raises(PluginExitError) as excinfo:
        execute_plugin(registry, "crash", request_payload)

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "boom"


def test_execute_malformed_output(registry, write_plugin, request_payload):
    write_plugin(
        "garbage",
        """
        import sys
        sys.stdin.read()
        print("uploaded everything!")
        """,
    )
    with pytest.raises(MalformedResponseError):
        execute_plugin(registry, "garbage", request_payload)


def test_execute_missing_plugin(registry, request_payload):
    with pytest.raises(PluginNotFoundError):
        execute_plugin(registry, "ghost", request_payload)
