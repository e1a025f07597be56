# Analysis module - Logging setup and diagnostic forwarding
# IMPURE - Has side effects (logging handlers, file I/O)

from .logger import setup_logging, emit_diagnostics
