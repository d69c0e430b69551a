"""
Loading and validating YAML mutation logs for replay against a Registry.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

from hiring_ledger.registry import Registry

logger = structlog.get_logger()

MUTATIONS = (
    "add_applicant",
    "add_job",
    "apply_for_job",
    "hire_applicant",
    "provide_rating",
    "update_work_preference",
)

INT_ARGUMENTS = {"job_id", "applicant_id", "salary", "rating"}
TEXT_ARGUMENTS = {"name", "skills", "phone", "email", "title", "description"}


class OperationLogError(Exception):
    """Mutation log file is malformed."""


@dataclass
class Operation:
    index: int
    op: str
    caller: str
    arguments: dict[str, Any] = field(default_factory=dict)

    def apply(self, registry: Registry) -> Any:
        """Invoke the matching registry mutation."""
        method = getattr(registry, self.op)
        return method(self.caller, **self.arguments)

    def __str__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.arguments.items())
        return f"[{self.index}] {self.caller}: {self.op}({args})"


@dataclass
class OperationLog:
    admin: str | None
    operations: list[Operation] = field(default_factory=list)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning an empty dict if it's blank."""
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            raise OperationLogError(f"{path}: invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise OperationLogError(f"{path}: top level must be a mapping")
    return data


def parse_operations(data: dict[str, Any], default_admin: str | None = None) -> OperationLog:
    admin = data.get("admin", default_admin)
    raw_ops = data.get("operations")
    if not isinstance(raw_ops, list):
        raise OperationLogError("'operations' must be a list")

    operations: list[Operation] = []
    for index, entry in enumerate(raw_ops, start=1):
        if not isinstance(entry, dict):
            raise OperationLogError(f"Operation {index} must be a mapping")
        arguments = dict(entry)
        op = arguments.pop("op", None)
        if op not in MUTATIONS:
            raise OperationLogError(f"Operation {index}: unknown op {op!r}")
        caller = arguments.pop("caller", admin)
        if caller is None:
            raise OperationLogError(f"Operation {index}: no caller and no admin given")
        arguments = _check_types(index, op, arguments)
        try:
            inspect.signature(getattr(Registry, op)).bind(None, caller, **arguments)
        except TypeError as exc:
            raise OperationLogError(f"Operation {index} ({op}): {exc}") from exc
        operations.append(Operation(index=index, op=op, caller=str(caller), arguments=arguments))

    logger.debug("Parsed operation log", admin=admin, operations=len(operations))
    return OperationLog(admin=admin, operations=operations)


def _check_types(index: int, op: str, arguments: dict[str, Any]) -> dict[str, Any]:
    checked: dict[str, Any] = {}
    for key, value in arguments.items():
        if key in INT_ARGUMENTS:
            # null is only meaningful for apply_for_job's optional applicant_id
            if value is None and op == "apply_for_job" and key == "applicant_id":
                pass
            elif isinstance(value, bool) or not isinstance(value, int):
                raise OperationLogError(
                    f"Operation {index} ({op}): {key} must be an integer, got {value!r}"
                )
        elif key in TEXT_ARGUMENTS:
            # Unquoted YAML scalars such as phone numbers load as numbers
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                value = str(value)
            elif not isinstance(value, str):
                raise OperationLogError(
                    f"Operation {index} ({op}): {key} must be text, got {value!r}"
                )
        elif key == "preference":
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise OperationLogError(
                    f"Operation {index} ({op}): preference must be a name or ordinal, got {value!r}"
                )
        checked[key] = value
    return checked


def load_operations(path: Path, default_admin: str | None = None) -> OperationLog:
    return parse_operations(load_yaml(path), default_admin=default_admin)
