#!/usr/bin/env python3
"""
CLI Entry Point — scaffold a React + Express app from the terminal
===================================================================
Usage:
    create-react-express-app my-app
    create-react-express-app my-app --port 4000 --skip-install
    create-react-express-app my-app --dry-run
    python -m create_app my-app -C ./apps --config scaffold.yaml

Exit status: 0 on success, 1 on any scaffolding error, 2 on bad usage.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from .config import load_config
from .creator import ProjectCreator
from .errors import ScaffoldError

PROG = "create-react-express-app"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,  # re-apply even if already configured
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="CLI to create a React app with an Express backend using Vite",
    )
    parser.add_argument("app_name", metavar="app-name", help="Name of the app")
    parser.add_argument(
        "--directory", "-C",
        dest="target_directory",
        default=None,
        help="Parent directory for the new project (default: current directory)",
    )
    parser.add_argument(
        "--port",
        default=None,
        help="Default server port baked into server.js and the Vite proxy (default: 3000)",
    )
    parser.add_argument(
        "--mode",
        dest="environment_mode",
        default=None,
        help="NODE_ENV value that makes server.js serve the built assets (default: production)",
    )
    parser.add_argument(
        "--config", "-f",
        dest="config_file",
        default="",
        help="Load settings from a YAML file",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        default=False,
        help="Do not run npm init / npm install; write a minimal package.json instead",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Print the files and scripts that would be created, then exit",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        default=False,
        help="Suppress progress messages",
    )
    return parser


def _print_next_steps(app_name: str) -> None:
    print("Project created successfully!")
    print("Run the following commands to get started:")
    print(f"  cd {app_name}")
    print("  npm run dev")


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(
            config_file=args.config_file or None,
            target_directory=args.target_directory,
            port=args.port,
            environment_mode=args.environment_mode,
            install=False if args.skip_install else None,
            verbose=True if args.verbose else None,
        )
    except ScaffoldError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    setup_logging(config.verbose)

    progress = None if args.quiet else print
    creator = ProjectCreator(config, progress=progress)

    try:
        if args.dry_run:
            print(creator.plan(args.app_name).render())
            return 0
        creator.create(args.app_name)
    except ScaffoldError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("Filesystem error", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not args.quiet:
        _print_next_steps(args.app_name)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
