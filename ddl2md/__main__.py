# Copyright 2025-present DatusAI, Inc.
# Licensed under the Apache License, Version 2.0.
# See http://www.apache.org/licenses/LICENSE-2.0 for details.

"""
Entry point for running the converter as a module.

Usage:
    python -m ddl2md --help
"""

from .cli import main

if __name__ == "__main__":
    main()
