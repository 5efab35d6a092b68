"""File system operations for output generation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from excel_schema_codegen.core.config import GenerationTarget, config


class OutputManager:
    """Manages file system operations for output generation.

    Generated files are created once and never overwritten, so hand edits in
    an existing output tree survive a re-run.
    """

    def __init__(self, output_dir: Path = config.generated.path) -> None:
        """Initialize the output manager.

        Args:
            output_dir: Base directory for output files
        """
        self.output_dir = output_dir

    def create_output_structure(self) -> None:
        """Create the base output directory structure.

        Raises:
            PermissionError: If unable to create directories
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            raise PermissionError(
                f"Failed to create output directory {self.output_dir}: {e}"
            ) from e

    def get_output_path(self, target: GenerationTarget, view: dict[str, Any]) -> Path:
        """Resolve a target's output pattern against an entity view.

        Args:
            target: Generation target holding the output pattern
            view: Entity view providing name, name_plural and origin_name

        Returns:
            Path of the file to write below the output directory
        """
        relative = target.output.format(
            name=view["name"],
            name_plural=view["name_plural"],
            origin_name=view["origin_name"],
        )
        return self.output_dir / relative

    def write_if_absent(self, path: Path, content: str) -> bool:
        """Write content to a new file.

        Args:
            path: File to create; missing parent directories are created
            content: Text to write, stored with a single trailing newline

        Returns:
            True if the file was written, False if it already existed

        Raises:
            PermissionError: If unable to write file
        """
        if path.exists():
            return False

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "x", encoding="utf-8", newline="\n") as f:
                f.write(content.rstrip("\n") + "\n")
            return True
        except FileExistsError:
            return False
        except Exception as e:
            raise PermissionError(f"Failed to write file to {path}: {e}") from e
