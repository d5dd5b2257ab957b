"""
Utilities for the graphmetrics driver.

Provides helpers for:
- Configuration
- Graph document validation
- Exit codes
"""

from .config import ConfigValidationError, get_engine_settings, load_config
from .exit_codes import (EXIT_CONFIG_ERROR, EXIT_INPUT_ERROR, EXIT_IO_ERROR,
                         EXIT_RUNTIME_ERROR, EXIT_SUCCESS,
                         get_exit_code_description, get_exit_code_name,
                         log_exit)
from .validation import (GraphInvariantError, ValidationError,
                         validate_graph_invariants, validate_json)

__all__ = [
    # config
    "load_config",
    "get_engine_settings",
    "ConfigValidationError",
    # validation
    "validate_json",
    "validate_graph_invariants",
    "ValidationError",
    "GraphInvariantError",
    # exit_codes
    "EXIT_SUCCESS",
    "EXIT_CONFIG_ERROR",
    "EXIT_INPUT_ERROR",
    "EXIT_RUNTIME_ERROR",
    "EXIT_IO_ERROR",
    "get_exit_code_name",
    "get_exit_code_description",
    "log_exit",
]
