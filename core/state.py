from __future__ import annotations

from services.workspace import MapWorkspace
from services.zones_store import ZoneIndex

# Single editing workspace; replaced at startup once zones are loaded.
# All mutation goes through the workspace's own lock.
workspace: MapWorkspace = MapWorkspace(ZoneIndex())

# WebSocket push control
stop_flag = False
