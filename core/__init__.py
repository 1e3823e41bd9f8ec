# CSS Bundler - Core Components
"""
Core modules for the CSS bundler:
- errors: Fatal bundling errors
- console: stderr logging (info, error, debug)
- resolver: @import resolution (inlines imported stylesheets)
- config: Bundle configuration and defaults
"""

from .errors import BundleError
from .resolver import resolve_imports
from .config import BundleConfig, load_config

__all__ = [
    'BundleError',
    'resolve_imports',
    'BundleConfig',
    'load_config',
]
