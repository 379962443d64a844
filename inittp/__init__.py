"""init-tp -- quickly set up Node.js projects with TypeScript.

Collects a project name, a TypeScript compiler, a package manager and an
install preference, then writes a minimal project skeleton and optionally
runs the package manager's install command.
"""

__version__ = "0.0.6"

__all__ = ["__version__"]
