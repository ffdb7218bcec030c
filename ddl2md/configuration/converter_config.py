# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Converter configuration.

Settings are read from a YAML file whose options sit under a top-level
``converter`` key:

    converter:
      markdown:
        not_null_marker: "Y"
        nullable_marker: "N"
        render_table_comment: true
      type_synonyms:
        SERIAL: INT
      max_sql_length: 1048576

Every option has a built-in default, so the file only lists overrides.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ddl2md.utils.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_HEADERS,
    DEFAULT_SEPARATORS,
    EMPTY_MARKER,
    NOT_NULL_MARKER,
    NULLABLE_MARKER,
    TYPE_SYNONYMS,
)
from ddl2md.utils.exceptions import DDLConvertException, ErrorCode
from ddl2md.utils.loggings import get_logger
from ddl2md.utils.sql_utils.validation import MAX_SQL_LENGTH

logger = get_logger(__name__)

COLUMN_COUNT = len(DEFAULT_HEADERS)


class MarkdownConfig(BaseModel):
    """Labels and markers used by the Markdown renderer."""

    headers: List[str] = Field(default_factory=lambda: list(DEFAULT_HEADERS), description="Table header labels")
    separators: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SEPARATORS), description="Separator row cells"
    )
    not_null_marker: str = Field(NOT_NULL_MARKER, description="Cell text for NOT NULL columns")
    nullable_marker: str = Field(NULLABLE_MARKER, description="Cell text for nullable columns")
    empty_marker: str = Field(EMPTY_MARKER, description="Cell text for a missing key type or default")
    render_table_comment: bool = Field(False, description="Render COMMENT ON TABLE text under the heading")

    @field_validator("headers", "separators")
    @classmethod
    def _six_cells(cls, value: List[str]) -> List[str]:
        if len(value) != COLUMN_COUNT:
            raise ValueError(f"expected {COLUMN_COUNT} cells, got {len(value)}")
        return value


class ConverterConfig(BaseModel):
    """Top-level converter configuration."""

    markdown: MarkdownConfig = Field(default_factory=MarkdownConfig)
    type_synonyms: Dict[str, str] = Field(
        default_factory=dict, description="Extra type keyword mappings, merged over the built-in table"
    )
    max_sql_length: int = Field(MAX_SQL_LENGTH, gt=0, description="Maximum accepted input length")

    def resolved_type_synonyms(self) -> Dict[str, str]:
        """Built-in synonyms with configured overrides applied; keys are uppercase."""
        merged = dict(TYPE_SYNONYMS)
        for base, canonical in self.type_synonyms.items():
            merged[" ".join(base.split()).upper()] = canonical.strip().upper()
        return merged


def load_converter_config(config: Optional[str] = None) -> ConverterConfig:
    """
    Load converter configuration.

    Args:
        config: Path to a YAML file; falls back to the DDL2MD_CONFIG environment
            variable, then to built-in defaults

    Returns:
        ConverterConfig

    Raises:
        DDLConvertException: CONFIG_LOAD_FAILED when the file cannot be read or
            does not validate
    """
    config_path = config or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return ConverterConfig()

    path = Path(config_path).expanduser()
    logger.debug(f"Loading converter config from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise DDLConvertException(ErrorCode.CONFIG_LOAD_FAILED, f"Failed to load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise DDLConvertException(ErrorCode.CONFIG_LOAD_FAILED, f"Config {path} must be a mapping")

    return build_converter_config(data.get("converter", data), source=str(path))


def build_converter_config(data: Dict[str, Any], source: str = "<dict>") -> ConverterConfig:
    """Validate a configuration mapping."""
    try:
        return ConverterConfig.model_validate(data or {})
    except ValidationError as e:
        raise DDLConvertException(ErrorCode.CONFIG_LOAD_FAILED, f"Invalid config {source}: {e}") from e
