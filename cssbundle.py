import argparse
import sys

from builder import build_bundle
from core.config import load_config
from core.console import set_verbose
from core.errors import BundleError


def cmd_build(args):
    set_verbose(args.verbose)
    try:
        config = load_config(args.root, {
            "entry": args.entry,
            "output": args.output,
            "dist_dir": args.dist_dir,
            "name": args.name,
        })
        report = build_bundle(config)
    except BundleError as e:
        print(f"Error building bundle: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✓ Bundle created: {report.output_path}")
    print(f"  Size: {report.size_kb} KB")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Bundle a stylesheet and its @imports into one file")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    parser.add_argument("--root", default=".", help="Project root (default: current directory)")
    parser.add_argument("--entry", help="Entry stylesheet, relative to the root (default: index.css)")
    parser.add_argument("--dist-dir", dest="dist_dir", help="Output directory, relative to the root (default: dist)")
    parser.add_argument("--output", help="Bundle file name (default: modest-components.css)")
    parser.add_argument("--name", help="Library name used in the header comment (default: modest-components)")

    args = parser.parse_args(argv)
    cmd_build(args)

if __name__ == "__main__":
    main()
