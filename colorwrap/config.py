import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .color import ColorArgument
from .console import console
from .formatting import DEFAULT_QUOTATION_MARK

# Load environment variables from .env file
load_dotenv()

# Configuration Defaults
DEFAULT_CONFIG = {
    "COLORWRAP_COLOR": ColorArgument.AUTO.value,
    "COLORWRAP_QUOTE_MARK": DEFAULT_QUOTATION_MARK,
}

# File Paths
COLORWRAP_DIR = Path(os.getenv("COLORWRAP_DIR", str(Path.home() / ".colorwrap")))
CONFIG_FILE = Path(os.getenv("COLORWRAP_CONFIG_FILE", str(COLORWRAP_DIR / "config.json")))


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from file (read-only; colorwrap never writes it)"""
    path = config_file if config_file is not None else CONFIG_FILE
    if path.exists():
        try:
            with open(path) as f:
                config = json.load(f)
        except (OSError, ValueError) as e:
            console.print(f"[yellow]Warning: Could not load config file {path}: {e}[/yellow]")
            return {}
        if isinstance(config, dict):
            return config
        console.print(f"[yellow]Warning: Ignoring config file {path}: expected a JSON object[/yellow]")
    return {}


def get_setting(key: str, default: str, config_file: Path | None = None) -> str:
    """Get setting with priority: Env Var > Config File > Default"""
    # 1. Environment Variable
    env_val = os.getenv(key)
    if env_val:
        return env_val

    # 2. Config File
    config = load_config(config_file)
    if key in config:
        return str(config[key])

    # 3. Default
    return default


def default_color_argument(config_file: Path | None = None) -> ColorArgument:
    """Color intent to use when --color is not given.

    An invalid configured value raises ColorArgumentError, the same as an
    invalid --color value would.
    """
    return ColorArgument.parse(
        get_setting("COLORWRAP_COLOR", DEFAULT_CONFIG["COLORWRAP_COLOR"], config_file)
    )


def default_quotation_mark(config_file: Path | None = None) -> str:
    """Quotation mark for the quote style when --mark is not given"""
    return get_setting("COLORWRAP_QUOTE_MARK", DEFAULT_CONFIG["COLORWRAP_QUOTE_MARK"], config_file)
