"""Project materializer.

Takes a ``ProjectConfig``, renders the project files and writes them under
``<output_dir>/<project_name>/``.  Writing is not transactional: if a write
fails partway through, the files already written stay on disk.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from inittp.models import ProjectConfig
from .renderer import TemplateRenderer, render_project


SOURCE_DIR = "src"


class ProjectGenerator:
    """Writes a rendered project to disk."""

    def __init__(self, config: ProjectConfig, generator_version: str) -> None:
        self.config = config
        self.generator_version = generator_version
        self.renderer = TemplateRenderer()

    async def generate(self, output_dir: str | Path) -> Path:
        """Generate the project structure.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  A subdirectory named after the project is created
                inside it.

        Returns:
            Path to the generated project root.
        """
        project_root = Path(output_dir) / self.config.project_name
        files = render_project(self.config, self.generator_version, self.renderer)

        await asyncio.to_thread(
            (project_root / SOURCE_DIR).mkdir, parents=True, exist_ok=True
        )
        await write_files(project_root, files)
        return project_root


async def write_files(root: Path, files: dict[str, str]) -> list[Path]:
    """Write every ``relative path -> content`` entry of *files* under *root*.

    Entries are written in order, one at a time.

    Raises:
        ValueError: If an entry would land outside *root*.
    """
    resolved_root = root.resolve()
    written: list[Path] = []
    for rel_path, content in files.items():
        target = root / rel_path
        if not target.resolve().is_relative_to(resolved_root):
            raise ValueError(f"Refusing to write outside the project directory: {rel_path}")
        await asyncio.to_thread(_write_file, target, content)
        written.append(target)
    return written


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
