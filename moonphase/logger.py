"""
Console logger for moonphase
Timestamped print() logging with global silent and debug switches
"""

import time

# Global logging configuration
_silent_mode = False  # When True, suppress all output
_debug_mode = False  # When True, log_debug() messages are printed
_start_time = time.monotonic()


def _get_timestamp():
    """Get time since the logger was loaded, formatted for log lines"""
    elapsed = time.monotonic() - _start_time
    minutes = int(elapsed // 60)
    seconds = elapsed % 60

    if minutes > 0:
        return f"[{minutes}m{seconds:05.2f}s]"
    return f"[{seconds:.2f}s]"


def log(message):
    """Main logging function - replaces print() calls

    Args:
        message: Message to log
    """
    if _silent_mode:
        return

    print(f"{_get_timestamp()} {message}")


def log_error(message):
    """Log error message with ERROR prefix"""
    log(f"ERROR: {message}")


def log_debug(message):
    """Log message only when debug mode is enabled"""
    if _debug_mode:
        log(f"DEBUG: {message}")


def set_silent_mode(silent=True):
    """Enable or disable silent mode

    Args:
        silent (bool): If True, suppress all log output
    """
    global _silent_mode
    _silent_mode = silent


def is_silent():
    """Check if logger is in silent mode"""
    return _silent_mode


def set_debug_mode(debug=True):
    """Enable or disable debug output

    Args:
        debug (bool): If True, log_debug() messages are printed
    """
    global _debug_mode
    _debug_mode = debug
