"""Main class that orchestrates the code generation process."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from openpyxl.worksheet.worksheet import Worksheet

from excel_schema_codegen.core.config import Config, config
from excel_schema_codegen.core.exceptions import (
    CodeGenerationError,
    ConfigurationError,
    SchemaExtractionError,
)
from excel_schema_codegen.core.schemas import SheetResult
from excel_schema_codegen.extraction.extractor import SchemaExtractor
from excel_schema_codegen.io.output_manager import OutputManager
from excel_schema_codegen.io.template_renderer import TemplateRenderer
from excel_schema_codegen.io.workbook_loader import open_workbook, parsable_sheet_names
from excel_schema_codegen.logger import logger, setup_logger
from excel_schema_codegen.view.view_model import ViewModelBuilder


class CodeGenerator:
    """Main class that orchestrates the code generation process.

    Each selected sheet goes through extraction, view building and rendering
    of every configured target before the next sheet starts.
    """

    def __init__(
        self,
        settings: Config = config,
        workbook_path: Path | None = None,
        output_path: Path | None = None,
    ) -> None:
        """Initialize the code generator.

        Args:
            settings: Application configuration
            workbook_path: Workbook to read, defaults to the configured one
            output_path: Output root, defaults to the configured one
        """
        self.settings = settings
        self.workbook_path = workbook_path or settings.source.path_to_excel_file
        self.output_path = output_path or settings.generated.path
        self.extractor = SchemaExtractor(settings)
        self.view_builder = ViewModelBuilder(settings)
        self.renderer = TemplateRenderer(settings.generated.templates_dir)
        self.output_manager = OutputManager(self.output_path)

    def run(self, sheet_names: Iterable[str] | None = None) -> None:
        """Run the complete generation process.

        Args:
            sheet_names: Sheets to generate, all parsable sheets when omitted

        Raises:
            SystemExit: With the matching exit code when the run fails or any
                sheet fails extraction
        """
        exit_codes = self.settings.exit_codes
        try:
            setup_logger()
            logger.info("Generating code from %s...", self.workbook_path)
            results = self.generate(sheet_names)
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e)
            sys.exit(exit_codes.error_configuration)
        except CodeGenerationError as e:
            logger.error("Code generation error: %s", e, exc_info=True)
            sys.exit(exit_codes.error_invalid_schema)
        except FileNotFoundError as e:
            logger.error("Missing required input file: %s", e, exc_info=True)
            sys.exit(exit_codes.error_file_not_found)
        except Exception:
            logger.exception("Unexpected error occurred")
            sys.exit(exit_codes.error_file_system)

        failed = [r for r in results if not r.succeeded]
        written = sum(len(r.written) for r in results)
        if failed:
            logger.error(
                "Generation finished with %d failed sheet(s): %s",
                len(failed),
                ", ".join(r.sheet_name for r in failed),
            )
            sys.exit(exit_codes.error_invalid_schema)
        logger.info("Generation completed successfully! Wrote %d file(s).", written)

    def run_for_testing(self, sheet_names: Iterable[str] | None = None) -> list[Path]:
        """Run the generation process and return the written files.

        Unlike run(), this method raises exceptions instead of calling sys.exit(),
        making it suitable for unit tests. Sheets that fail extraction are
        skipped, as in run().

        Returns:
            List of paths that were written
        """
        results = self.generate(sheet_names)
        return [path for result in results for path in result.written]

    def list_sheets(self) -> list[str]:
        """Return the names of the parsable sheets of the workbook."""
        wb = open_workbook(self.workbook_path)
        return parsable_sheet_names(
            wb, self.settings.source.header_marker, self.settings.source.include_keywords
        )

    def generate(self, sheet_names: Iterable[str] | None = None) -> list[SheetResult]:
        """Generate the targets of each selected sheet.

        Args:
            sheet_names: Sheets to generate; names that are not parsable are ignored

        Returns:
            One SheetResult per processed sheet, in processing order
        """
        wb = open_workbook(self.workbook_path)
        available = parsable_sheet_names(
            wb, self.settings.source.header_marker, self.settings.source.include_keywords
        )
        if sheet_names is None:
            selected = available
        else:
            wanted = list(sheet_names)
            for name in wanted:
                if name not in available:
                    logger.warning("Sheet '%s' is not parsable, skipping", name)
            selected = [name for name in available if name in wanted]

        self.output_manager.create_output_structure()

        results: list[SheetResult] = []
        for sheet_name in selected:
            logger.info("Rendering %s", sheet_name)
            results.append(self.generate_sheet(wb[sheet_name]))
        return results

    def generate_sheet(self, ws: Worksheet) -> SheetResult:
        """Extract one sheet and render all targets for it.

        Extraction errors end the sheet, they do not propagate.
        """
        result = SheetResult(sheet_name=ws.title)
        try:
            entity = self.extractor.extract(ws)
        except SchemaExtractionError as e:
            logger.error("Skipping sheet '%s': %s", ws.title, e)
            result.add_error(str(e))
            return result

        result.entity_name = entity.name
        view = self.view_builder.build(entity)
        for path, written in self.render_targets(view):
            if written:
                result.written.append(path)
            else:
                logger.info("%s already exists, leaving it untouched", path)
                result.skipped.append(path)
        logger.info("Generated %s", ws.title)
        return result

    def render_targets(self, view: dict[str, Any]) -> list[tuple[Path, bool]]:
        """Render every configured target for one entity view.

        Returns:
            (path, written) pairs in target order
        """
        context = self.render_context(view)
        outcomes: list[tuple[Path, bool]] = []
        for target in self.settings.generated.targets:
            output = self.renderer.render(target.template, context)
            path = self.output_manager.get_output_path(target, view)
            outcomes.append((path, self.output_manager.write_if_absent(path, output)))
        return outcomes

    def render_context(self, view: dict[str, Any]) -> dict[str, Any]:
        generated = self.settings.generated
        return {
            "entity": view,
            "id_type": generated.entity.id_type,
            "namespaces": {
                "entity": generated.entity.namespace,
                "dto": generated.dto.namespace,
                "cqrs": generated.cqrs_namespace,
                "validation": generated.validation_namespace,
                "controller": generated.controller_namespace,
                "test": generated.test_namespace,
            },
        }
