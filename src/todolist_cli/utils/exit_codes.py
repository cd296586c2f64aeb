"""
Exit codes for todolist-cli.

Every store, validation and focus error terminates with ERROR_GENERAL.
ERROR_USAGE is what click reports for malformed command lines.
"""

# Success
SUCCESS = 0

# Any validation, lookup, confirmation or store failure
ERROR_GENERAL = 1

# Command-line usage error (unknown option, missing argument)
ERROR_USAGE = 2


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_USAGE: "ERROR_USAGE",
    }
    return code_names.get(code, f"UNKNOWN({code})")

