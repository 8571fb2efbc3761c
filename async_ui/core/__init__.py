"""
Core - configuration, logging and the outbound event channel.

Provides:
- ConfigManager: pydantic-validated settings with optional persistence
- setup_logging: loguru sinks
- Event / EventChannel: records pushed by widget listeners

Usage:
    from async_ui.core import ConfigManager, setup_logging_from, EventChannel

    config = ConfigManager("async_ui.toml")
    setup_logging_from(config.data.general)
    channel = EventChannel(maxsize=config.data.binding.channel_maxsize)
"""
from .config import AppConfig, BindingSettings, ConfigManager, GeneralSettings, get_config, set_config
from .logging import setup_logging, setup_logging_from, teardown_logging
from .events import Event, EventAction, EventChannel, EventKind, make_event

__all__ = [
    "AppConfig",
    "BindingSettings",
    "ConfigManager",
    "GeneralSettings",
    "get_config",
    "set_config",
    "setup_logging",
    "setup_logging_from",
    "teardown_logging",
    "Event",
    "EventAction",
    "EventChannel",
    "EventKind",
    "make_event",
]
