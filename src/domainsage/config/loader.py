import os
import tomllib
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Path to config.toml inside the package
CONFIG_FILE = Path(__file__).resolve().parent / "config.toml"


def load_toml(path=CONFIG_FILE):
    """Load and parse the TOML config file."""
    try:
        with Path(path).open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        raise RuntimeError(f"Config file not found: {path}")
    except tomllib.TOMLDecodeError as e:
        raise RuntimeError(f"Invalid TOML in {path}: {e}")


def env_flag(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Load TOML contents
raw = load_toml()


# -------------------------------
#  SUFFIX LIST CONFIG
# -------------------------------
suffix_list = raw.get("suffix_list", {})

PSL_PATH = os.getenv("DOMAINSAGE_PSL_PATH", suffix_list.get("path", "")) or None
PSL_URL = os.getenv(
    "DOMAINSAGE_PSL_URL",
    suffix_list.get("url", "https://publicsuffix.org/list/public_suffix_list.dat")
)
PSL_INCLUDE_PRIVATE = suffix_list.get("include_private", True)
PSL_FETCH_TIMEOUT_SECONDS = suffix_list.get("fetch_timeout_seconds", 10)
PSL_MAX_SIZE_BYTES = suffix_list.get("max_size_bytes", 4 * 1024 * 1024)


# -------------------------------
#  PARSER CONFIG
# -------------------------------
PARSER = raw.get("parser", {})

MAX_LABELS = PARSER.get("max_labels", 127)
STRICT = env_flag("DOMAINSAGE_STRICT", PARSER.get("strict", False))
