import os

from pydantic import BaseModel

from core.config import BundleConfig
from core.console import debug_log, log
from core.errors import BundleError
from core.resolver import resolve_imports


class BundleReport(BaseModel):
    """Outcome of a successful build."""
    output_path: str
    size: int
    files: int

    @property
    def size_kb(self):
        return f"{self.size / 1024:.2f}"


def write_bundle(path, content):
    """Write the bundle, overwriting any previous one."""
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)


def bundle_source(config: BundleConfig):
    """Resolve the entry stylesheet and prepend the generated header.

    Returns the bundle text and the set of files that went into it.
    """
    visited = set()
    try:
        content = resolve_imports(config.entry_path, visited)
    except (OSError, UnicodeDecodeError) as e:
        raise BundleError(
            "Cannot read entry file",
            path=config.entry_path,
            cause=e,
            suggestion="Run from the project root or pass --root/--entry",
        ) from e
    return config.header() + content, visited


def build_bundle(config: BundleConfig) -> BundleReport:
    """
    Build the bundle described by `config`.

    Raises:
        BundleError: If the entry file can't be read or the output
            can't be written
    """
    log("Building CSS bundle...")

    try:
        os.makedirs(config.dist_path, exist_ok=True)
    except OSError as e:
        raise BundleError("Cannot create output directory", path=config.dist_path, cause=e) from e

    final_content, visited = bundle_source(config)
    debug_log(f"Inlined {len(visited)} file(s)")

    try:
        write_bundle(config.output_path, final_content)
    except OSError as e:
        raise BundleError("Cannot write bundle", path=config.output_path, cause=e) from e

    return BundleReport(
        output_path=config.output_path,
        size=len(final_content),
        files=len(visited),
    )
