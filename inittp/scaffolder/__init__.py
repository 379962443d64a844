"""init-tp scaffolder -- renders and writes the project skeleton.

Quick usage::

    from inittp.models import ProjectConfig
    from inittp.scaffolder import ProjectGenerator

    config = ProjectConfig(project_name="my-project", compiler="swc")
    generator = ProjectGenerator(config, generator_version="0.0.6")
    project_path = await generator.generate("/tmp/output")
"""

from inittp.scaffolder.generator import ProjectGenerator, write_files
from inittp.scaffolder.renderer import TemplateRenderer, build_manifest, render_project

__all__ = [
    "ProjectGenerator",
    "TemplateRenderer",
    "build_manifest",
    "render_project",
    "write_files",
]
