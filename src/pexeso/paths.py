from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Paths:
    repo_root: Path
    data_dir: Path
    schema_dir: Path
    assets_dir: Path
    userdata_dir: Path


def _repo_root(package_dir: Path) -> Path:
    # Source checkout: src/pexeso -> parents: [src, repo_root].
    # Installed copies live in site-packages, so assets/ and userdata/
    # are taken from the working directory instead.
    if package_dir.parent.name == "src":
        return package_dir.parents[1]
    return Path.cwd()


def get_paths(package_dir: Path | None = None) -> Paths:
    package_dir = package_dir or Path(__file__).resolve().parent
    repo_root = _repo_root(package_dir)
    data_dir = package_dir / "data"
    schema_dir = data_dir / "schemas"
    assets_dir = repo_root / "assets"
    userdata_dir = repo_root / "userdata"
    return Paths(
        repo_root=repo_root,
        data_dir=data_dir,
        schema_dir=schema_dir,
        assets_dir=assets_dir,
        userdata_dir=userdata_dir,
    )
