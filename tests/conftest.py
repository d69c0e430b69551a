"""
Pytest configuration and fixtures for Hiring Ledger tests.
"""

import os
import sys
from pathlib import Path

import pytest
import structlog

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Pin settings before importing any modules
os.environ['ADMIN_IDENTITY'] = 'admin'
os.environ['MAX_RATING'] = '5'
os.environ['HIRE_RATING_BONUS'] = '1'

ADMIN = "admin"


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test installed."""
    yield
    structlog.reset_defaults()


@pytest.fixture(scope="function")
def registry():
    """Empty registry owned by the admin identity."""
    from hiring_ledger.registry import Registry

    return Registry(admin=ADMIN)


@pytest.fixture(scope="function")
def seeded_registry(registry):
    """Registry with two applicants and two open jobs."""
    registry.add_applicant(ADMIN, "Alice", "python, sql", "555-0100", "alice@example.com", "Remote")
    registry.add_applicant(ADMIN, "Bob", "go", "555-0101", "bob@example.com")
    registry.add_job(ADMIN, "Engineer", "Backend services", 120000)
    registry.add_job(ADMIN, "Designer", "Product design", 90000)

    yield registry


@pytest.fixture(scope="function")
def oplog_path(tmp_path):
    """Write a small mutation log and return its path."""
    path = tmp_path / "hiring.yaml"
    path.write_text(
        """
admin: admin
operations:
  - op: add_applicant
    name: Alice
    skills: python
    phone: "555-0100"
    email: alice@example.com
    preference: Remote
  - op: add_job
    title: Engineer
    description: Backend services
    salary: 120000
  - op: apply_for_job
    caller: alice
    job_id: 1
    applicant_id: 1
  - op: hire_applicant
    job_id: 1
    applicant_id: 1
""",
        encoding="utf-8",
    )
    return path


# Markers for test categories
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")
