# Shared utilities: config, logging, paths

from career_fair.utils.logger import get_logger, setup_logger
from career_fair.utils.config import Config, get_config
from career_fair.utils.path_helpers import ensure_path, ensure_dir

__all__ = [
    # Logger
    'get_logger',
    'setup_logger',

    # Config
    'Config',
    'get_config',

    # Path helpers
    'ensure_path',
    'ensure_dir',
]
