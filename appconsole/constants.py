"""
Package-wide constants and resource limits.
"""

# Resource limits
MAX_COMMAND_NAME_LENGTH = 255  # Maximum length for command and group names

# Pseudo-command that shows help of the command named after it
HELP_COMMAND = "help"

# Process exit codes used at the bootstrap boundary
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130  # 128 + SIGINT

# Prefix for configuration environment overrides
ENV_PREFIX = "APPCONSOLE_"
