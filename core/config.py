# ==========================================
# CONFIGURATION
# ==========================================
"""
Bundle configuration: fixed defaults, an optional cssbundle.json in the
project root, and explicit overrides (CLI flags) on top.
"""
import json
import os

from pydantic import BaseModel, ValidationError, field_validator

from .errors import BundleError

CONFIG_FILE = "cssbundle.json"

DEFAULT_ENTRY = "index.css"
DEFAULT_DIST_DIR = "dist"
DEFAULT_OUTPUT = "modest-components.css"
DEFAULT_NAME = "modest-components"

HEADER_TEMPLATE = """/* {name} - Bundled CSS
 * Generated from {entry} and all component styles
 * This file contains all styles in a single file for easy distribution
 */

"""


class BundleConfig(BaseModel):
    """Where to read the entry stylesheet from and where to write the bundle."""
    root: str = "."
    entry: str = DEFAULT_ENTRY
    dist_dir: str = DEFAULT_DIST_DIR
    output: str = DEFAULT_OUTPUT
    name: str = DEFAULT_NAME

    @field_validator('entry', 'output', 'name', 'dist_dir')
    @classmethod
    def not_empty(cls, value):
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator('output')
    @classmethod
    def bare_file_name(cls, value):
        if os.path.basename(value) != value:
            raise ValueError("must be a file name, set dist_dir for the directory")
        return value

    @property
    def entry_path(self):
        return os.path.join(self.root, self.entry)

    @property
    def dist_path(self):
        return os.path.join(self.root, self.dist_dir)

    @property
    def output_path(self):
        return os.path.join(self.dist_path, self.output)

    def header(self):
        """Generated comment placed at the top of the bundle."""
        return HEADER_TEMPLATE.format(name=self.name, entry=self.entry)


def load_config(root=".", overrides=None):
    """
    Build a BundleConfig for a project root.

    Values from <root>/cssbundle.json (if present) replace the defaults,
    and non-None entries of `overrides` replace both.

    Raises:
        BundleError: If the config file can't be read or a value is invalid
    """
    values = {}
    config_path = os.path.join(root, CONFIG_FILE)
    if os.path.exists(config_path):
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise BundleError("Invalid config file", path=config_path, cause=e) from e
        if not isinstance(values, dict):
            raise BundleError(
                "Invalid config file",
                path=config_path,
                suggestion="The config file must contain a JSON object",
            )

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value
    values["root"] = root

    try:
        return BundleConfig(**values)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(p) for p in first["loc"])
        raise BundleError(
            f"Invalid config value '{field}': {first['msg']}",
            path=config_path if os.path.exists(config_path) else None,
        ) from e
