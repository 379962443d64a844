"""Template rendering for project scaffolding.

Provides the ``TemplateRenderer`` class, which loads Jinja2 templates from
the ``inittp/scaffolder/templates/`` directory, and ``render_project``, a pure
function mapping a ``ProjectConfig`` to the files of a new project.
Structured files (``package.json``, ``tsconfig.json``,
``pnpm-workspace.yaml``) are built as dicts and serialised; free-form text
files come from templates.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from inittp.models import ProjectConfig
from .presets import COMMON_DEV_DEPENDENCIES, COMPILER_PRESETS, PACKAGE_MANAGER_PRESETS


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

INITIAL_VERSION = "0.0.1"
ENTRY_POINT = "dist/index.js"
IGNORED_PATHS = ("node_modules/", "dist/", ".env")

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "es6",
        "module": "commonjs",
        "outDir": "./dist",
        "rootDir": "./src",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
    }
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the Jinja2 templates shipped with init-tp."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"README.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Project rendering
# ---------------------------------------------------------------------------


def build_manifest(config: ProjectConfig, generator_version: str) -> dict[str, Any]:
    """Return the ``package.json`` contents for *config*."""
    preset = COMPILER_PRESETS[config.compiler]
    return {
        "name": config.project_name,
        "version": INITIAL_VERSION,
        "main": ENTRY_POINT,
        "scripts": preset.scripts(),
        "dependencies": {},
        "devDependencies": {**preset.dev_dependencies, **COMMON_DEV_DEPENDENCIES},
        "initTp": f"v{generator_version}",
    }


def render_project(
    config: ProjectConfig,
    generator_version: str,
    renderer: TemplateRenderer | None = None,
) -> dict[str, str]:
    """Render every file of a new project.

    Args:
        config: The resolved project configuration.
        generator_version: Version stamped into the manifest's ``initTp`` key.
        renderer: Template renderer; a default one is created when omitted.

    Returns:
        Mapping of POSIX-style relative path to file content.  The same
        arguments always produce identical output.
    """
    renderer = renderer or TemplateRenderer()
    pm_preset = PACKAGE_MANAGER_PRESETS[config.package_manager]

    files: dict[str, str] = {
        "package.json": _dump_json(build_manifest(config, generator_version)),
        "tsconfig.json": _dump_json(TSCONFIG),
        ".gitignore": renderer.render("gitignore.j2", {"ignored": IGNORED_PATHS}),
        "README.md": renderer.render(
            "README.md.j2",
            {"project_name": config.project_name, "invocation": pm_preset.invocation},
        ),
        "src/index.ts": renderer.render("index.ts.j2", {}),
    }

    if pm_preset.npmrc:
        files[".npmrc"] = renderer.render("npmrc.j2", {"settings": dict(pm_preset.npmrc)})
    if pm_preset.workspace_packages:
        files["pnpm-workspace.yaml"] = yaml.safe_dump(
            {"packages": list(pm_preset.workspace_packages)},
            default_flow_style=False,
            sort_keys=False,
        )

    return files


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
