import os
from importlib import resources
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "secret_santa.yml"
CONFIG_ENV_VAR = "SECRET_SANTA_CONFIG"
PACKAGED_CONFIG = "defaults.yml"

# Relative paths in the packaged defaults resolve here
USER_DIR = Path.home() / ".secret_santa"

DEFAULT_MAX_ATTEMPTS = 10000
DEFAULT_RECENT_YEARS = 3


class SSConfig:
    def __init__(self, data, base_dir=None):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.solver = data.get("solver", {}) or {}
        self.rules = data.get("rules", {}) or {}
        self.debug = data.get("debug", False)
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    @property
    def max_attempts(self):
        """Attempt bound for the solver; ``None`` means retry forever."""
        if "max_attempts" not in self.solver:
            return DEFAULT_MAX_ATTEMPTS
        value = self.solver["max_attempts"]
        return None if value is None else int(value)

    @property
    def recent_years(self) -> int:
        return int(self.rules.get("recent_years", DEFAULT_RECENT_YEARS))

    def resolve_path(self, value) -> Path:
        path = Path(value).expanduser()
        return path if path.is_absolute() else self.base_dir / path


def _read_yaml(text: str) -> dict:
    return yaml.safe_load(text) or {}


def load_config() -> 'SSConfig':
    """
    Lookup order: ``$SECRET_SANTA_CONFIG``, the project's
    ``config/secret_santa.yml``, then the defaults shipped with the package.

    Relative paths inside a file resolve against the project root for the
    project config, the file's own directory for an env override, and
    ``~/.secret_santa`` for the packaged defaults.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return SSConfig(_read_yaml(path.read_text(encoding="utf-8")), base_dir=path.parent)

    if CONFIG_PATH.exists():
        data = _read_yaml(CONFIG_PATH.read_text(encoding="utf-8"))
        return SSConfig(data, base_dir=CONFIG_PATH.parents[1])

    text = resources.files("secret_santa").joinpath(PACKAGED_CONFIG).read_text(encoding="utf-8")
    return SSConfig(_read_yaml(text), base_dir=USER_DIR)

_config_cache = None

def get_config() -> 'SSConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache
