"""
Unit tests for the bundle configuration.
"""
import json
import os
import sys
import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from core.config import CONFIG_FILE, BundleConfig, load_config
from core.errors import BundleError


class TestBundleConfig:
    """Tests for BundleConfig defaults and derived paths."""

    def test_defaults(self):
        """Without settings the bundle goes from index.css to dist/."""
        config = BundleConfig()
        assert config.entry_path == os.path.join('.', 'index.css')
        assert config.output_path == os.path.join('.', 'dist', 'modest-components.css')

    def test_paths_follow_root(self):
        config = BundleConfig(root='/project', entry='src/main.css', dist_dir='build')
        assert config.entry_path == os.path.join('/project', 'src/main.css')
        assert config.dist_path == os.path.join('/project', 'build')
        assert config.output_path == os.path.join('/project', 'build', 'modest-components.css')

    def test_header(self):
        """The header comment names the library and the entry file."""
        header = BundleConfig(name='acme-ui', entry='main.css').header()
        assert header.startswith('/* acme-ui - Bundled CSS\n')
        assert ' * Generated from main.css and all component styles\n' in header
        assert header.endswith(' */\n\n')

    def test_empty_entry_rejected(self):
        with pytest.raises(ValidationError):
            BundleConfig(entry='  ')

    def test_output_with_directory_rejected(self):
        """The output is a file name; its directory is dist_dir."""
        with pytest.raises(ValidationError):
            BundleConfig(output='out/bundle.css')


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_config_file(self, tmp_path):
        config = load_config(str(tmp_path))
        assert config.root == str(tmp_path)
        assert config.entry == 'index.css'

    def test_reads_config_file(self, tmp_path):
        """Values from cssbundle.json replace the defaults."""
        (tmp_path / CONFIG_FILE).write_text(json.dumps({"entry": "styles.css", "name": "acme"}))

        config = load_config(str(tmp_path))

        assert config.entry == 'styles.css'
        assert config.name == 'acme'
        assert config.output == 'modest-components.css'

    def test_overrides_win(self, tmp_path):
        """Explicit overrides beat the file; None overrides are ignored."""
        (tmp_path / CONFIG_FILE).write_text(json.dumps({"entry": "styles.css", "name": "acme"}))

        config = load_config(str(tmp_path), {"entry": "other.css", "name": None})

        assert config.entry == 'other.css'
        assert config.name == 'acme'

    def test_malformed_json(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text('{"entry": ')

        with pytest.raises(BundleError) as exc_info:
            load_config(str(tmp_path))
        assert CONFIG_FILE in str(exc_info.value)

    def test_non_object_json(self, tmp_path):
        (tmp_path / CONFIG_FILE).write_text('["index.css"]')

        with pytest.raises(BundleError):
            load_config(str(tmp_path))

    def test_invalid_value(self, tmp_path):
        """Validation errors name the offending field."""
        with pytest.raises(BundleError) as exc_info:
            load_config(str(tmp_path), {"output": "a/b.css"})
        assert "'output'" in str(exc_info.value)
