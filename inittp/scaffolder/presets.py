"""Per-compiler and per-package-manager lookup tables.

Both tables are total over their enum, so the renderer never branches on a
compiler or package manager itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from inittp.models import Compiler, PackageManager


DEV_SCRIPT = "tsx watch src/index.ts"

# Present in every generated manifest regardless of compiler.
COMMON_DEV_DEPENDENCIES: Mapping[str, str] = MappingProxyType({
    "@types/node": "^18.0.0",
    "tsx": "^4.19.4",
})


@dataclass(frozen=True)
class CompilerPreset:
    """Scripts and dev dependencies contributed by a compiler choice."""

    build: str
    start: str
    dev: str
    dev_dependencies: Mapping[str, str]

    def scripts(self) -> dict[str, str]:
        return {"start": self.start, "build": self.build, "dev": self.dev}


@dataclass(frozen=True)
class PackageManagerPreset:
    """Invocation command and extra files contributed by a package manager."""

    install_command: tuple[str, ...]
    invocation: str
    npmrc: Mapping[str, str] = field(default_factory=dict)
    workspace_packages: tuple[str, ...] = ()


COMPILER_PRESETS: Mapping[Compiler, CompilerPreset] = MappingProxyType({
    Compiler.TSC: CompilerPreset(
        build="tsc",
        start="node dist/index.js",
        dev=DEV_SCRIPT,
        dev_dependencies=MappingProxyType({"typescript": "^5.8.3"}),
    ),
    Compiler.ESBUILD: CompilerPreset(
        build="esbuild src/index.ts --bundle --platform=node --outfile=dist/index.js",
        start="node dist/index.js",
        dev=DEV_SCRIPT,
        dev_dependencies=MappingProxyType({"esbuild": "^0.25.5"}),
    ),
    # swc keeps the src/ prefix when compiling the whole directory.
    Compiler.SWC: CompilerPreset(
        build="swc src -d dist",
        start="node dist/src/index.js",
        dev=DEV_SCRIPT,
        dev_dependencies=MappingProxyType({
            "@swc/cli": "^0.7.7",
            "@swc/core": "^1.11.29",
        }),
    ),
})


PACKAGE_MANAGER_PRESETS: Mapping[PackageManager, PackageManagerPreset] = MappingProxyType({
    PackageManager.NPM: PackageManagerPreset(
        install_command=("npm", "install"),
        invocation="npx init-tp",
    ),
    PackageManager.PNPM: PackageManagerPreset(
        install_command=("pnpm", "install"),
        invocation="pnpm dlx init-tp",
        npmrc=MappingProxyType({
            "auto-install-peers": "true",
            "strict-peer-dependencies": "false",
        }),
        workspace_packages=(".",),
    ),
})
