"""
Root pytest configuration for envschema.

Every test runs from its own temporary working directory against an
isolated environment table, so nothing touches the real process
environment unless a test opts in through monkeypatch.
"""

import pytest

import envschema
from envschema.config import EnvironmentTable, Validator


@pytest.fixture(autouse=True)
def reset_shared_validator():
    """Give each test a fresh module-level validator."""
    envschema.reset()
    yield
    envschema.reset()


@pytest.fixture(autouse=True)
def no_deployment_environment(monkeypatch):
    """Keep the caller's APP_ENV/ENVIRONMENT from leaking into tests."""
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)


@pytest.fixture
def app_dir(tmp_path, monkeypatch):
    """Temporary application root, also used as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def environ():
    return EnvironmentTable.from_dict()


@pytest.fixture
def validator(app_dir, environ):
    return Validator(app_dir, environ=environ)


@pytest.fixture
def shared_validator(app_dir, environ):
    """The module-level validator, bound to the temporary app and table."""
    return envschema.configure(app_dir, environ=environ)
