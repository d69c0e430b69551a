"""
Mutation log and CLI Tests

Run with: pytest tests/test_oplog_cli.py -v
"""

import json

import pytest
from click.testing import CliRunner

from hiring_ledger.cli import cli
from hiring_ledger.registry import Registry
from hiring_ledger.utils.oplog import OperationLogError, load_operations, parse_operations

QUIET = ["--log-level", "CRITICAL"]


class TestOperationLog:
    """Test parsing mutation logs."""

    def test_load_operations(self, oplog_path):
        """Test operations load in order with callers resolved."""
        log = load_operations(oplog_path)

        assert log.admin == "admin"
        assert [op.op for op in log.operations] == [
            "add_applicant", "add_job", "apply_for_job", "hire_applicant",
        ]
        assert log.operations[0].caller == "admin"
        assert log.operations[2].caller == "alice"
        assert log.operations[2].arguments == {"job_id": 1, "applicant_id": 1}

    def test_apply_operations(self, oplog_path):
        """Test replaying a log against a registry."""
        log = load_operations(oplog_path)
        registry = Registry(admin=log.admin)
        for operation in log.operations:
            operation.apply(registry)

        assert registry.get_job(1).filled is True
        assert registry.get_applicant_rating(1) == 1

    def test_default_admin(self):
        """Test the default admin applies when the log names none."""
        log = parse_operations(
            {"operations": [{"op": "add_job", "title": "t", "description": "d", "salary": 1}]},
            default_admin="owner",
        )
        assert log.operations[0].caller == "owner"

    def test_unknown_op(self):
        """Test unknown operations are rejected."""
        with pytest.raises(OperationLogError):
            parse_operations({"admin": "admin", "operations": [{"op": "delete_job"}]})

    def test_bad_arguments(self):
        """Test arguments are checked against the operation signature."""
        with pytest.raises(OperationLogError):
            parse_operations({"admin": "admin", "operations": [{"op": "add_job", "title": "t"}]})

    def test_operations_must_be_list(self):
        """Test a log without an operations list is rejected."""
        with pytest.raises(OperationLogError):
            parse_operations({"admin": "admin"})

    def test_top_level_must_be_mapping(self, tmp_path):
        """Test a YAML list at the top level is rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("- op: add_job\n", encoding="utf-8")
        with pytest.raises(OperationLogError):
            load_operations(path)


class TestCli:
    """Test the command-line interface."""

    def test_replay_prints_state(self, oplog_path):
        """Test replay prints notifications and the final tables."""
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["replay", str(oplog_path)])

        assert result.exit_code == 0, result.output
        assert "#1 ApplicantRegistered" in result.output
        assert "#4 ApplicantHired(job_id=1, applicant_id=1)" in result.output
        assert "Engineer\t$120,000\tfilled by 1" in result.output

    def test_replay_json(self, oplog_path):
        """Test the JSON document."""
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["replay", str(oplog_path), "--json"])

        assert result.exit_code == 0, result.output
        document = json.loads(result.output)
        assert document["jobs"][0]["filled"] is True
        assert document["applicants"][0]["rating"] == 1
        assert document["applicants"][0]["work_preference"] == "Remote"
        assert [e["name"] for e in document["events"]][-1] == "ApplicantHired"
        assert document["summary"]["jobs_filled"] == 1
        assert document["errors"] == []

    def test_replay_stops_on_error(self, tmp_path):
        """Test the first rejected operation aborts the replay."""
        path = tmp_path / "dup.yaml"
        path.write_text(
            "admin: admin\n"
            "operations:\n"
            "  - {op: add_job, title: t, description: d, salary: 1}\n"
            "  - {op: apply_for_job, caller: bob, job_id: 1}\n"
            "  - {op: apply_for_job, caller: bob, job_id: 1}\n",
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["replay", str(path)])

        assert result.exit_code == 1
        assert "[3]" in result.output
        assert "already applied" in result.output

    def test_replay_continue_on_error(self, tmp_path):
        """Test rejected operations are collected when asked."""
        path = tmp_path / "errors.yaml"
        path.write_text(
            "admin: admin\n"
            "operations:\n"
            "  - {op: add_job, caller: mallory, title: t, description: d, salary: 1}\n"
            "  - {op: add_job, title: t, description: d, salary: 1}\n"
            "  - {op: hire_applicant, job_id: 1, applicant_id: 1}\n",
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["replay", str(path), "--continue-on-error", "--json"])

        assert result.exit_code == 0, result.output
        document = json.loads(result.output)
        assert [e["error"] for e in document["errors"]] == ["Unauthorized", "NotFound"]
        assert [e["index"] for e in document["errors"]] == [1, 3]
        assert document["summary"]["jobs"] == 1

    def test_validate(self, oplog_path):
        """Test validate reports the operation count."""
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["validate", str(oplog_path)])

        assert result.exit_code == 0
        assert "4 operations, admin=admin" in result.output

    def test_validate_bad_log(self, tmp_path):
        """Test validate fails on a malformed log."""
        path = tmp_path / "bad.yaml"
        path.write_text("admin: admin\noperations: nope\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["validate", str(path)])

        assert result.exit_code == 1
        assert "must be a list" in result.output


class TestOperationLogTypes:
    """Test argument types in mutation logs."""

    @pytest.mark.parametrize("entry", [
        {"op": "add_job", "title": "t", "description": "d", "salary": "100"},
        {"op": "apply_for_job", "caller": "bob", "job_id": "1"},
        {"op": "apply_for_job", "caller": "bob", "job_id": 1.0},
        {"op": "provide_rating", "applicant_id": 1, "rating": 2.5},
        {"op": "hire_applicant", "job_id": True, "applicant_id": 1},
        {"op": "add_applicant", "name": ["a"], "skills": "", "phone": "", "email": ""},
    ])
    def test_wrong_types_rejected(self, entry):
        """Test mistyped arguments are reported as log errors."""
        with pytest.raises(OperationLogError):
            parse_operations({"admin": "admin", "operations": [entry]})

    def test_numeric_text_coerced(self):
        """Test unquoted numeric text fields load as strings."""
        log = parse_operations({
            "admin": "admin",
            "operations": [{"op": "add_applicant", "name": "Al", "skills": "", "phone": 5550100, "email": ""}],
        })
        assert log.operations[0].arguments["phone"] == "5550100"

    def test_null_applicant_id_allowed(self):
        """Test apply_for_job may leave applicant_id empty."""
        log = parse_operations({
            "admin": "admin",
            "operations": [{"op": "apply_for_job", "caller": "bob", "job_id": 1, "applicant_id": None}],
        })
        assert log.operations[0].arguments["applicant_id"] is None

    def test_replay_reports_mistyped_salary(self, tmp_path):
        """Test replay fails cleanly on a quoted salary."""
        path = tmp_path / "typed.yaml"
        path.write_text(
            "admin: admin\n"
            "operations:\n"
            "  - {op: add_job, title: t, description: d, salary: \"100\"}\n",
            encoding="utf-8",
        )
        runner = CliRunner()
        result = runner.invoke(cli, QUIET + ["replay", str(path)])

        assert result.exit_code == 1
        assert "Operation 1 (add_job): salary must be an integer" in result.output
        assert not isinstance(result.exception, TypeError)
