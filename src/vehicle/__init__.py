# Vehicle module - Geometry value object and factory
# IMPURE - Emits diagnostics through logging

from .vehicle_info import VehicleInfo, create_vehicle_info
