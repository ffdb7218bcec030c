# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

from .converter_config import ConverterConfig, MarkdownConfig, build_converter_config, load_converter_config

__all__ = ["ConverterConfig", "MarkdownConfig", "build_converter_config", "load_converter_config"]
