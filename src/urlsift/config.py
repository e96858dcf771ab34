#!/usr/bin/env python3
"""
Configuration management for the URL analysis pipeline
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def _env_flag(name: str) -> Optional[bool]:
    value = os.getenv(name)
    if value is None or value == '':
        return None
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class ScanConfiguration:
    """
    Options consumed by the analysis pipeline.

    Stage flags overlap on purpose: `param_scan` enables both the risky and
    the reflected parameter stages, and `run_all` turns every stage on
    regardless of the narrower flags. Read the `should_*` properties rather
    than the raw flags.
    """
    timeout: int = 10
    proxy: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
    catalog_path: Optional[str] = None  # None selects the bundled catalog

    categorize: bool = False
    param_scan: bool = False
    param_risky: bool = False
    param_reflected: bool = False
    request: bool = False
    run_all: bool = False

    @property
    def should_categorize(self) -> bool:
        return self.categorize or self.run_all

    @property
    def should_scan_risky(self) -> bool:
        return self.param_scan or self.param_risky or self.run_all

    @property
    def should_scan_reflected(self) -> bool:
        return self.param_scan or self.param_reflected or self.run_all

    @property
    def should_request(self) -> bool:
        return self.request or self.run_all

    def validate(self) -> None:
        """Raise ValueError on options the pipeline cannot work with"""
        if self.timeout <= 0:
            raise ValueError(f"timeout must be a positive number of seconds, got {self.timeout}")
        if self.proxy:
            scheme = urlparse(self.proxy).scheme
            if scheme not in ('http', 'https'):
                raise ValueError(f"proxy must be an http:// or https:// URL, got {self.proxy!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScanConfiguration':
        """Build a configuration from a plain mapping, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key in known:
                kwargs[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return cls(**kwargs)

    @classmethod
    def load_from_file(cls, config_path: str) -> 'ScanConfiguration':
        """Load configuration from a JSON file"""
        with open(config_path, 'r') as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def load_from_env(cls) -> 'ScanConfiguration':
        """Load configuration from environment variables"""
        config = cls()

        if os.getenv('URLSIFT_TIMEOUT'):
            config.timeout = int(os.getenv('URLSIFT_TIMEOUT'))
        if os.getenv('URLSIFT_PROXY'):
            config.proxy = os.getenv('URLSIFT_PROXY')
        if os.getenv('URLSIFT_USER_AGENT'):
            config.user_agent = os.getenv('URLSIFT_USER_AGENT')
        if os.getenv('URLSIFT_CATALOG'):
            config.catalog_path = os.getenv('URLSIFT_CATALOG')

        flag_names = {
            'URLSIFT_CATEGORIZE': 'categorize',
            'URLSIFT_PARAM_SCAN': 'param_scan',
            'URLSIFT_PARAM_RISKY': 'param_risky',
            'URLSIFT_PARAM_REFLECTED': 'param_reflected',
            'URLSIFT_REQUEST': 'request',
            'URLSIFT_ALL': 'run_all',
        }
        for env_name, attr in flag_names.items():
            value = _env_flag(env_name)
            if value is not None:
                setattr(config, attr, value)

        return config


def load_env_file(env_file: Path = Path(".env"), override: bool = False) -> Dict[str, str]:
    """
    Export KEY=VALUE pairs from a .env file into the process environment.

    Variables already present in the environment win unless override is set,
    so a shell export always beats the file.

    Returns:
        The pairs that were actually exported
    """
    exported: Dict[str, str] = {}
    if not env_file.exists():
        return exported

    for raw_line in env_file.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, value = line.removeprefix('export ').split('=', 1)
        key = key.strip()
        if key in os.environ and not override:
            logger.debug(f"Keeping existing {key} over {env_file}")
            continue
        exported[key] = value.strip().strip('"').strip("'")

    os.environ.update(exported)
    return exported
