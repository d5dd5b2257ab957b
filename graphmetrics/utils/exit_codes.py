"""
Standard exit codes for the graph2metrics driver.

- Codes 1-2: configuration/input problems, fixable by user
- Code 3: runtime errors (including numerical failures), require log analysis
- Code 5: filesystem problems, check access permissions
"""

import logging
from typing import Optional

EXIT_SUCCESS = 0  # Successful execution
EXIT_CONFIG_ERROR = 1  # Configuration errors (broken config.toml, bad values)
EXIT_INPUT_ERROR = 2  # Input data errors (missing file, broken JSON, schema violations)
EXIT_RUNTIME_ERROR = 3  # Runtime errors (eigensolver failure, unexpected exceptions)
EXIT_IO_ERROR = 5  # File write errors, directory access issues

EXIT_CODE_NAMES = {
    EXIT_SUCCESS: "SUCCESS",
    EXIT_CONFIG_ERROR: "CONFIG_ERROR",
    EXIT_INPUT_ERROR: "INPUT_ERROR",
    EXIT_RUNTIME_ERROR: "RUNTIME_ERROR",
    EXIT_IO_ERROR: "IO_ERROR",
}

EXIT_CODE_DESCRIPTIONS = {
    EXIT_SUCCESS: "Successful execution",
    EXIT_CONFIG_ERROR: "Configuration errors",
    EXIT_INPUT_ERROR: "Input data errors",
    EXIT_RUNTIME_ERROR: "Runtime errors",
    EXIT_IO_ERROR: "Filesystem errors",
}


def get_exit_code_name(code: int) -> str:
    """Readable name for an exit code, 'UNKNOWN(<code>)' if not defined."""
    return EXIT_CODE_NAMES.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    return EXIT_CODE_DESCRIPTIONS.get(code, f"Unknown exit code: {code}")


def log_exit(logger: logging.Logger, code: int, message: Optional[str] = None) -> None:
    """
    Logs exit code with optional message.

    Success goes to INFO, everything else to ERROR.

    Args:
        logger: Logger object
        code: Exit code
        message: Additional message (optional)
    """
    code_name = get_exit_code_name(code)
    suffix = f" - {message}" if message else ""

    if code == EXIT_SUCCESS:
        logger.info(f"Exit: {code_name}{suffix}")
    else:
        code_desc = get_exit_code_description(code)
        logger.error(f"Exit with error: {code_name} ({code_desc}){suffix}")
