"""Qt integration for the inverter: slider bindings and background workers."""
