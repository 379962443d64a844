"""init-tp command-line entry point.

Usage::

    init-tp
    init-tp my-app --compiler swc --package-manager pnpm --install
    python -m inittp my-app -c esbuild --no-install
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from inittp import __version__
from inittp.config import Settings
from inittp.installer import InstallError, install_dependencies
from inittp.models import (
    InvalidInputError,
    PartialConfig,
    ProjectConfig,
    parse_compiler,
    parse_package_manager,
)
from inittp.prompts import ConsolePrompter, Prompter
from inittp.resolver import check_options, resolve_config
from inittp.scaffolder import ProjectGenerator
from inittp.utils import console, print_error, print_success, print_summary_table


class CLIArgumentParser(argparse.ArgumentParser):
    """Reports command-line errors in red and exits with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(f"Error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = CLIArgumentParser(
        prog="init-tp",
        description="Quickly set up Node.js projects with TypeScript",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  init-tp\n"
            "  init-tp my-app -c swc -p pnpm --install\n"
            "  init-tp my-app --compiler esbuild --no-install\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Project name (lowercase letters, digits and hyphens)",
    )
    # Enumerated values are checked by hand so a bad value exits with status 1.
    parser.add_argument(
        "--compiler", "-c",
        default=None,
        metavar="{tsc,esbuild,swc}",
        help="TypeScript compiler to configure",
    )
    parser.add_argument(
        "--package-manager", "-p",
        default=None,
        metavar="{npm,pnpm}",
        help="Package manager for the new project",
    )
    parser.add_argument(
        "--install", "-i",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run the package manager's install command after generating",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> PartialConfig:
    """Convert parsed arguments into a ``PartialConfig``.

    Raises:
        InvalidInputError: If an enumerated value or the project name is invalid.
    """
    options = PartialConfig(
        project_name=args.project_name,
        compiler=parse_compiler(args.compiler) if args.compiler is not None else None,
        package_manager=(
            parse_package_manager(args.package_manager)
            if args.package_manager is not None
            else None
        ),
        run_install=args.install,
    )
    check_options(options)
    return options


async def scaffold(config: ProjectConfig, settings: Settings) -> Path:
    """Write the project and run the install step if requested."""
    generator = ProjectGenerator(config, settings.generator_version)
    project_root = await generator.generate(settings.output_dir)
    await install_dependencies(config, project_root, timeout=settings.install_timeout)
    return project_root


def main(
    argv: Optional[Sequence[str]] = None,
    prompter: Optional[Prompter] = None,
    settings: Optional[Settings] = None,
) -> None:
    """CLI entry point for ``init-tp`` and ``python -m inittp``."""
    args = build_parser().parse_args(argv)

    try:
        options = options_from_args(args)
        settings = settings or Settings.from_env()
    except InvalidInputError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    prompter = prompter or ConsolePrompter()

    try:
        config = resolve_config(options, prompter)
        project_root = asyncio.run(scaffold(config, settings))
    except (KeyboardInterrupt, EOFError):
        console.print("\nProcess aborted by user.")
        sys.exit(0)
    except InstallError as exc:
        print_error(f"Error running {exc.package_manager.value} install: {exc}")
        sys.exit(1)
    except Exception as exc:
        print_error(f"Error initializing project: {exc}")
        sys.exit(1)

    print_summary_table(
        {
            "Project": config.project_name,
            "Compiler": config.compiler.value,
            "Package manager": config.package_manager.value,
            "Dependencies installed": "yes" if config.run_install else "no",
        },
        title="init-tp",
    )
    print_success(
        f"Project '{config.project_name}' initialized in {project_root.resolve()} "
        f"using {config.compiler.value}."
    )


if __name__ == "__main__":
    main()
