"""Tests for the module-level facade and the boot hook."""

import pytest

import envschema
from envschema.boot import boot, resolve_environment
from envschema.config import EnvironmentTable, ManifestError, MissingVariablesError


class TestFacade:

    def test_shared_validator_is_created_once(self, app_dir):
        first = envschema.get_validator()

        assert envschema.get_validator() is first
        assert first.app_root == app_dir

    def test_reset_discards_registrations(self, shared_validator):
        envschema.register("API_KEY", required=True)
        envschema.reset()

        assert envschema.get_validator() is not shared_validator
        assert len(envschema.get_validator().registry) == 0

    def test_register_and_validate_delegate(self, shared_validator, environ, capsys):
        envschema.register("API_KEY", type="string", required=True)
        envschema.register("PORT", type="integer", default=3000)

        envschema.validate()

        assert "API_KEY" in capsys.readouterr().err
        assert environ["PORT"] == "3000"
        assert "API_KEY" in shared_validator.registry

    def test_validate_strict_raises(self, shared_validator):
        envschema.register("API_KEY", required=True)

        with pytest.raises(envschema.MissingVariablesError):
            envschema.validate_strict()

    def test_load_populates_environment(self, shared_validator, environ, app_dir):
        (app_dir / ".env").write_text("API_KEY=test_key\n")

        envschema.load()

        assert environ["API_KEY"] == "test_key"
        assert shared_validator.dotenv_loaded


class TestResolveEnvironment:

    def test_explicit_argument_wins(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "staging")

        assert resolve_environment("Production") == "production"

    def test_app_env_then_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "test")
        assert resolve_environment() == "test"

        monkeypatch.setenv("APP_ENV", "production")
        assert resolve_environment() == "production"

    def test_defaults_to_development(self):
        assert resolve_environment() == "development"


class TestBoot:

    @pytest.fixture
    def manifest(self, app_dir):
        path = app_dir / "config" / "env_schema.yaml"
        path.parent.mkdir()
        path.write_text("variables:\n  API_KEY:\n    required: true\n  PORT:\n    type: integer\n    default: 3000\n")
        return path

    def test_development_warns(self, shared_validator, manifest, capsys):
        validator = boot()

        assert validator is shared_validator
        assert len(validator.registry) == 2
        assert "API_KEY" in capsys.readouterr().err

    def test_production_raises(self, shared_validator, manifest):
        with pytest.raises(MissingVariablesError):
            boot(environment="production")

    def test_app_env_production_raises(self, shared_validator, manifest, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")

        with pytest.raises(MissingVariablesError):
            boot()

    def test_strict_flag_raises_outside_production(self, shared_validator, manifest):
        with pytest.raises(MissingVariablesError):
            boot(environment="development", strict=True)

    def test_production_passes_when_configured(self, shared_validator, manifest, app_dir, environ):
        (app_dir / ".env").write_text("API_KEY=test_key\n")

        boot(environment="production")

        assert environ["API_KEY"] == "test_key"
        assert environ["PORT"] == "3000"

    def test_without_manifest_validates_code_registrations(self, shared_validator):
        envschema.register("DATABASE_URL", required=True, strict=True)

        with pytest.raises(MissingVariablesError):
            boot()

    def test_explicit_missing_manifest_raises(self, shared_validator, app_dir):
        with pytest.raises(ManifestError):
            boot(manifest=app_dir / "nope.yaml")

    def test_uses_app_root_for_new_validator(self, app_dir, tmp_path, monkeypatch):
        app_root = tmp_path / "app"
        (app_root / "config").mkdir(parents=True)
        (app_root / "config" / "env_schema.yaml").write_text("variables:\n  NAME:\n    default: demo\n")
        envschema.configure(app_root, environ=EnvironmentTable.from_dict())

        validator = boot(app_root)

        assert validator.app_root == app_root
        assert validator.environ["NAME"] == "demo"
