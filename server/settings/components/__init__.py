"""Shared helpers for settings components."""

from pathlib import Path
from typing import Final

from decouple import AutoConfig

# Repository root: server/settings/components -> project root
BASE_DIR: Final = Path(__file__).parent.parent.parent.parent

# Reads values from environment variables or a `.env` file in BASE_DIR
config = AutoConfig(search_path=BASE_DIR)
