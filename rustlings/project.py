"""Generation of a rust-project.json file for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry in rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for ``path`` if it has an .rs extension."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike = "./exercises") -> None:
        """Add a crate for every .rs file found below ``root``."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(path)

    def find_sysroot_src(self) -> None:
        """Set the standard library source path from RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return

        output = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        ).stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output

        print(f"Determined toolchain: {toolchain}\n")

        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self) -> str:
        """Serialise to compact JSON."""
        return json.dumps(
            {
                "sysroot_src": self.sysroot_src,
                "crates": [asdict(crate) for crate in self.crates],
            },
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def write_to_disk(self, path: str | os.PathLike = "./rust-project.json") -> None:
        """Write the JSON document to ``path``."""
        Path(path).write_text(self.to_json(), encoding="utf-8")