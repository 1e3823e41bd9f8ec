"""
Import resolver for stylesheets.

Recursively resolves '@import "file.css";' directives by inlining file
contents, one line at a time, similar to a C preprocessor.
"""
import os
import re

from .console import debug_log, error_log

# Matches: @import "path"; / @import 'path' (anywhere on the line)
IMPORT_PATTERN = re.compile(r'@import\s+["\'](.+?)["\'];?')


def read_source(file_path):
    """Read a stylesheet as UTF-8 text, keeping line endings untouched."""
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def resolve_imports(file_path, visited=None):
    """
    Replaces every '@import "x.css";' line with the resolved content of x.css.

    Args:
        file_path: Path to the stylesheet to resolve
        visited: Set of already-entered paths, shared across the recursive
            calls of one top-level resolution. A file in this set expands
            to an empty string.

    Returns:
        The stylesheet text with all imports inlined

    Raises:
        OSError: If file_path itself can't be read
        UnicodeDecodeError: If file_path isn't valid UTF-8
    """
    if visited is None:
        visited = set()

    # Absolute path so "./a.css" and "a.css" share one visited entry
    abs_path = os.path.abspath(file_path)

    if abs_path in visited:
        debug_log(f"Skipping already included {abs_path}")
        return ""
    visited.add(abs_path)

    debug_log(f"Resolving {abs_path}")
    content = read_source(abs_path)
    base_dir = os.path.dirname(abs_path)

    resolved_lines = []
    for line in content.split('\n'):
        match = IMPORT_PATTERN.search(line)
        if not match:
            resolved_lines.append(line)
            continue

        import_path = match.group(1)
        # Absolute import paths stay absolute
        target = os.path.join(base_dir, import_path)
        try:
            # The whole line is replaced, text around the directive included
            resolved_lines.append(resolve_imports(target, visited))
        except (OSError, UnicodeDecodeError) as e:
            error_log(f"Error importing {import_path}: {e}")
            # Keep the original directive if resolution fails
            resolved_lines.append(line)

    return '\n'.join(resolved_lines)
