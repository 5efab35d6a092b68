"""Centralized logging configuration for the Excel schema code generator.

This module provides a configured logger instance that can be imported and used
throughout the application. The logger is configured from logging_config.json,
which routes records through a queue handler to stderr.

Usage:
    from excel_schema_codegen.logger import logger

    logger.info("This is an info message")
    logger.debug("This is a debug message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
