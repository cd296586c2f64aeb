"""Services module for todolist-cli - configuration and list file persistence."""

from .config_service import ConfigService, get_config_service
from .store_service import StoreService, dump_list_file, parse_list_file

__all__ = [
    "ConfigService",
    "StoreService",
    "dump_list_file",
    "get_config_service",
    "parse_list_file",
]
