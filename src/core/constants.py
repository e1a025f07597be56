# Numeric thresholds for the vehicle geometry
# FORBIDDEN: logging, any I/O

# Smallest wheel base magnitude kept as-is, below this it is clamped [m]
MIN_WHEEL_BASE_M = 1e-6

# Smallest max steer angle magnitude kept as-is [rad]
MIN_MAX_STEER_ANGLE_RAD = 1e-6

# Curvatures below this magnitude are treated as straight ahead [1/m]
MIN_CURVATURE = 1e-6

# Base dimensions must be strictly greater than this
MIN_POSITIVE_VALUE = 0.0

# Default logger name used for diagnostics
LOGGER_NAME = "vehicle_info"
