"""Tests for SettingsManager scope handling and merging."""

import pytest
import yaml

from classloader.config import ConfigError
from classloader.settings import ScopeNotAvailableError
from classloader.settings import SettingsManager
from classloader.settings import SettingsPaths


@pytest.fixture
def paths(tmp_path):
    return SettingsPaths(
        user=tmp_path / "user" / "settings.yaml",
        project=tmp_path / "project" / "settings.yaml",
        local=tmp_path / "project" / "settings.local.yaml",
    )


@pytest.fixture
def manager(paths):
    return SettingsManager(paths)


def write_yaml(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.dump(data))


class TestNamespaces:
    def test_empty_without_files(self, manager):
        assert manager.get_namespaces() == {}

    def test_later_scopes_override(self, manager, paths):
        write_yaml(paths.user, {"namespaces": {"App": "/user/app", "Vendor": "/user/vendor"}})
        write_yaml(paths.project, {"namespaces": {"App": "/project/app"}})
        write_yaml(paths.local, {"namespaces": {"Local": "/local"}})

        assert manager.get_namespaces() == {
            "App": "/project/app",
            "Vendor": "/user/vendor",
            "Local": "/local",
        }

    def test_invalid_entries_are_skipped(self, manager, paths):
        write_yaml(paths.project, {"namespaces": {"App": "/app", "Bad": ["/x"]}})

        assert manager.get_namespaces() == {"App": "/app"}

    def test_non_mapping_section_is_skipped(self, manager, paths):
        write_yaml(paths.project, {"namespaces": ["App"]})

        assert manager.get_namespaces() == {}

    def test_unreadable_yaml_is_skipped(self, manager, paths):
        paths.project.parent.mkdir(parents=True)
        paths.project.write_text("namespaces: [unclosed\n")

        assert manager.get_namespaces() == {}

    def test_add_namespace_writes_scope_file(self, manager, paths):
        written = manager.add_namespace("App", "/srv/app", scope="local")

        assert written == paths.local
        assert yaml.safe_load(paths.local.read_text()) == {"namespaces": {"App": "/srv/app"}}

    def test_add_namespace_preserves_other_settings(self, manager, paths):
        write_yaml(paths.project, {"loader": {"extension": "php"}, "namespaces": {"Old": "/old"}})

        manager.add_namespace("App", "/srv/app", scope="project")

        data = yaml.safe_load(paths.project.read_text())
        assert data == {"loader": {"extension": "php"}, "namespaces": {"Old": "/old", "App": "/srv/app"}}

    def test_remove_namespace(self, manager, paths):
        write_yaml(paths.project, {"namespaces": {"App": "/app", "Other": "/other"}})

        assert manager.remove_namespace("App", scope="project") is True
        assert yaml.safe_load(paths.project.read_text()) == {"namespaces": {"Other": "/other"}}

    def test_remove_last_namespace_drops_section(self, manager, paths):
        write_yaml(paths.project, {"namespaces": {"App": "/app"}, "loader": {"extension": "py"}})

        manager.remove_namespace("App", scope="project")

        assert yaml.safe_load(paths.project.read_text()) == {"loader": {"extension": "py"}}

    def test_remove_missing_namespace(self, manager):
        assert manager.remove_namespace("App", scope="global") is False

    def test_unavailable_scope(self, tmp_path):
        manager = SettingsManager(SettingsPaths(user=tmp_path / "settings.yaml"))

        with pytest.raises(ScopeNotAvailableError) as exc_info:
            manager.add_namespace("App", "/app", scope="project")
        assert exc_info.value.scope == "project"


class TestLoaderConfig:
    def test_defaults_without_settings(self, manager):
        config = manager.get_loader_config()

        assert config.extension == "py"

    def test_merged_loader_section(self, manager, paths):
        write_yaml(paths.user, {"loader": {"extension": "php", "separator": "\\"}})
        write_yaml(paths.local, {"loader": {"extension": "inc"}})

        config = manager.get_loader_config()

        assert config.extension == "inc"
        assert config.separator == "\\"

    def test_invalid_loader_section(self, manager, paths):
        write_yaml(paths.project, {"loader": {"separator": "::"}})

        with pytest.raises(ConfigError):
            manager.get_loader_config()
