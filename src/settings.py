"""
Zaban settings
Scanner options, config file loading and logging setup
"""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

import toml

CONFIG_FILENAMES = ('zaban.json', 'zaban.toml')

class ConfigError(Exception):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            super().__init__(f"{path}: {message}")
        else:
            super().__init__(message)

@dataclass(frozen=True)
class ScannerSettings:
    track_lines: bool = True
    extended_operators: bool = True
    show_lines: bool = False
    summary: bool = False
    verbose: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any],
                     path: Optional[str] = None) -> 'ScannerSettings':
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in mapping.items():
            name = key.replace('-', '_')
            if name not in known:
                raise ConfigError(f"unknown setting '{key}'", path)
            if not isinstance(value, bool):
                raise ConfigError(f"setting '{key}' must be true or false", path)
            values[name] = value
        return cls(**values)

def configure_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='[%(levelname)s] %(message)s',
        force=True,
    )

def find_config(cwd: Optional[str] = None) -> Optional[str]:
    cwd = cwd or os.getcwd()
    for name in CONFIG_FILENAMES:
        candidate = os.path.join(cwd, name)
        if os.path.isfile(candidate):
            return candidate
    return None

def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Read scanner settings from a JSON or TOML file.

    Without a path, zaban.json or zaban.toml in the working directory is
    used if present. Settings may live at top level or under a `lexer`
    table. Returns an empty dict when there is nothing to load.
    """
    if not config_path:
        config_path = find_config()
    if not config_path:
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            if config_path.endswith('.json'):
                cfg = json.load(f)
            elif config_path.endswith('.toml'):
                cfg = toml.load(f)
            else:
                raise ConfigError("unsupported config format (expected .json or .toml)", config_path)
    except OSError as e:
        raise ConfigError(f"cannot read config: {e}", config_path) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"config is not valid UTF-8: {e}", config_path) from e
    except (json.JSONDecodeError, toml.TomlDecodeError) as e:
        raise ConfigError(f"malformed config: {e}", config_path) from e

    if not isinstance(cfg, dict):
        raise ConfigError("config must be a table of settings", config_path)
    if 'lexer' in cfg:
        cfg = cfg['lexer']
        if not isinstance(cfg, dict):
            raise ConfigError("'lexer' must be a table of settings", config_path)

    return cfg

def settings_from_args(config: Mapping[str, Any],
                       overrides: Mapping[str, Optional[bool]],
                       path: Optional[str] = None) -> ScannerSettings:
    """Merge file settings with command line flags; flags left as None keep the file value."""
    settings = ScannerSettings.from_mapping(config, path)
    changes = {key: value for key, value in overrides.items() if value is not None}
    return replace(settings, **changes)
