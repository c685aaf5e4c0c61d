"""Names of the settings written by the startup bootstrap."""
from __future__ import annotations

DEFAULT_USER_ROLE = "role:user:default"
TIMEZONE = "gen:timezone"
DEFAULT_TICKET_TYPE = "ticket:type:default"
SEARCH_ENABLE = "es:enable"
SEARCH_HOST = "es:host"
SEARCH_PORT = "es:port"
MAINTENANCE_MODE = "maintenanceMode:enable"
INSTALLATION_ID = "gen:installid"
