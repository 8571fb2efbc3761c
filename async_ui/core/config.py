from typing import Any, Callable, List, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger


# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    log_dir: str = "logs"
    log_to_file: bool = False
    log_rotation: str = "10 MB"  # loguru rotation of the file sink
    log_retention: str = "1 week"

class BindingSettings(BaseModel):
    enforce_ui_thread: bool = True  # raise UiThreadError off the QApplication thread
    channel_maxsize: int = Field(default=0, ge=0)  # 0 = unbounded

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    binding: BindingSettings = Field(default_factory=BindingSettings)


# --- Manager ---
class ConfigManager:
    """
    Manages binding configuration with optional persistence and change callbacks.

    Without a filepath the configuration lives in memory only.
    """
    def __init__(self, filepath: Optional[str] = None):
        self.filepath = filepath
        self._data = AppConfig()
        self._subscribers: List[Callable[[str, str, Any], None]] = []
        if filepath:
            self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def on_changed(self, callback: Callable[[str, str, Any], None]) -> None:
        """Register callback(section, key, value) fired after every update."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, save if file-backed, notify subscribers."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if key not in type(section_obj).model_fields:
            raise ValueError(f"Invalid key: {key} in section {section}")

        validated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, validated)
        if self.filepath:
            self._save()
        for callback in list(self._subscribers):
            callback(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if not os.path.isfile(self.filepath):
            logger.debug(f"No config at {self.filepath}, using defaults")
            return
        if self.filepath.endswith('.toml'):
            import tomllib
            with open(self.filepath, "rb") as f:
                raw = tomllib.load(f)
        else:
            with open(self.filepath, "r", encoding="utf-8") as f:
                raw = json.load(f)
        self._data = AppConfig.model_validate(raw)
        logger.info(f"Loaded config from {self.filepath}")

    def _save(self):
        """Persist current config as JSON."""
        dirname = os.path.dirname(self.filepath)
        if dirname:
            os.makedirs(dirname, exist_ok=True)
        with open(self.filepath, "w", encoding="utf-8") as f:
            json.dump(self._data.model_dump(), f, indent=4)


_config: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Process-wide configuration, created in memory on first use."""
    global _config
    if _config is None:
        _config = ConfigManager()
    return _config


def set_config(config: Optional[ConfigManager]) -> None:
    """Replace the process-wide configuration (None resets to defaults on next use)."""
    global _config
    _config = config
