"""Shared constants for sstarter dot-directories and helper defaults."""

SSTARTER_HOME_EXT = ".sstarter"  # user-level state/config directory suffix

SSTARTER_HOME_ENV = "SSTARTER_HOME"

# Environment override for the graceful-restart helper command line
HELPER_BIN_ENV = "SSTARTER_HELPER_BIN"

DEFAULT_HELPER_BIN = "start_server"

# Directory used for derived PID files
DEFAULT_PID_DIR = "/tmp"

# Status vocabulary other components key on
STATUS_RUNNING = "running"
STATUS_NOT_RUNNING = "not running"
STATUS_RELOADED = "reloaded"
STATUS_STOPPED = "stopped"

# Termination timeout handed to the daemon wrapper on start
DEFAULT_TERM_TIMEOUT = 5.0

# How long stop waits for the wrapper to exit
DEFAULT_STOP_TIMEOUT = 7.0
