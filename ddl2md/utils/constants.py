# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from typing import Dict, List

# 基础类型标准化映射（方言同义词 -> 统一写法）
TYPE_SYNONYMS: Dict[str, str] = {
    "INT": "INT",
    "INTEGER": "INT",
    "BIGINT": "BIGINT",
    "SMALLINT": "SMALLINT",
    "TINYINT": "TINYINT",
    "VARCHAR": "VARCHAR",
    "CHAR": "CHAR",
    "TEXT": "TEXT",
    "LONGTEXT": "LONGTEXT",
    "MEDIUMTEXT": "MEDIUMTEXT",
    "DATETIME": "DATETIME",
    "TIMESTAMP": "TIMESTAMP",
    "DATE": "DATE",
    "TIME": "TIME",
    "DECIMAL": "DECIMAL",
    "NUMERIC": "NUMERIC",
    "FLOAT": "FLOAT",
    "DOUBLE": "DOUBLE",
    "BOOLEAN": "BOOLEAN",
    "BOOL": "BOOLEAN",
    "BLOB": "BLOB",
    "JSON": "JSON",
    "ENUM": "ENUM",
    # PostgreSQL aliases
    "INT2": "SMALLINT",
    "INT4": "INT",
    "INT8": "BIGINT",
    "FLOAT4": "FLOAT",
    "FLOAT8": "DOUBLE",
    "DOUBLE PRECISION": "DOUBLE",
    "CHARACTER VARYING": "VARCHAR",
    "CHARACTER": "CHAR",
}

# Markdown 输出默认值
DEFAULT_HEADERS: List[str] = ["字段名", "类型", "键类型", "非空", "默认值", "说明"]
DEFAULT_SEPARATORS: List[str] = ["--------", "------", "--------", "------", "--------", "------"]
NOT_NULL_MARKER = "是"
NULLABLE_MARKER = "否"
EMPTY_MARKER = "-"
KEY_PRIMARY = "PRIMARY KEY"
KEY_UNIQUE = "UNIQUE"

CONFIG_ENV_VAR = "DDL2MD_CONFIG"
