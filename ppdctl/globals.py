APP_NAME = "ppdctl"

CONFIG_FILE_NAME = APP_NAME + ".conf"
CONFIG_SECTION = APP_NAME
SYSTEM_CONFIG_FILE = "/etc/" + CONFIG_FILE_NAME

BUS_TYPES = ("system", "session")
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")

BATTERY_AWARE_LABEL = "Dynamic changes from charger and battery events"
NOT_DEGRADED = "no"
