from __future__ import annotations
import logging
import threading
import time
from collections import deque
from typing import Any, Deque, Dict, Optional

from models.mesh import Mesh
from models.polygon import AreaMeasurement
from models.selection import ActiveSavedPolygon, ActiveZoneReport, Selection, ViewMode
from models.workspace import DRAFT_MESH_ID, DraftView, SavedPolygonView, WorkspaceSnapshot
from services.coordinates import validate_coordinate
from services.editor import PolygonEditor
from services.extrusion import build_extrusion, clamp_height
from services.polygon_store import SavedPolygonStore
from services.selection import ClickKind, ClickOutcome, SelectionResolver
from services.zones_store import ZoneIndex

logger = logging.getLogger("zoneplot.services.workspace")

DEFAULT_EVENTS_MAX = 200


class MapWorkspace:
    """Applies map input events to the editor, store and selection.

    Every event runs to completion under one lock, so a reset can never
    interleave with a half-applied drag or save.
    """

    def __init__(
        self,
        zones: ZoneIndex,
        *,
        mode: ViewMode = ViewMode.ZONING_INSPECTION,
        building_height: float = 10.0,
        events_max: int = DEFAULT_EVENTS_MAX,
    ):
        self.zones = zones
        self.editor = PolygonEditor()
        self.polygons = SavedPolygonStore()
        self.resolver = SelectionResolver(zones, self.polygons)
        self.mode = mode
        self.three_d = False
        self.building_height = clamp_height(building_height)
        self.selection: Selection = None
        self.events: Deque[dict[str, Any]] = deque(maxlen=events_max)
        self.lock = threading.RLock()

    # ---- input events ----

    def click(self, raw: Any) -> ClickOutcome:
        point = validate_coordinate(raw)
        with self.lock:
            outcome = self.resolver.resolve(point, self.mode)
            if outcome.kind is ClickKind.ZONE_REPORT and outcome.zone is not None:
                zone = outcome.zone
                self.selection = ActiveZoneReport(zone_id=zone.id, zone_name=zone.name, report=dict(zone.report))
                self._record("zone_selected", zone=zone.id)
            elif outcome.kind is ClickKind.SAVED_POLYGON and outcome.polygon is not None:
                self.selection = ActiveSavedPolygon(polygon_id=outcome.polygon.id)
                self._record("polygon_selected", polygon=outcome.polygon.id)
            elif outcome.kind is ClickKind.ADD_VERTEX:
                self.selection = None
                vertex = self.editor.add_vertex(point)
                self._record("vertex_added", index=len(self.editor) - 1, point=list(vertex))
            return outcome

    def drag_vertex(self, index: int, raw: Any) -> bool:
        with self.lock:
            self.selection = None
            moved = self.editor.drag_vertex(index, raw)
            if moved:
                self._record("vertex_moved", index=index, point=list(self.editor.vertices[index]))
            return moved

    def save(self) -> Optional[str]:
        with self.lock:
            taken = self.editor.take_ring()
            if taken is None:
                self._record("save_rejected", vertices=len(self.editor))
                return None
            ring, area = taken
            self.selection = None
            polygon_id = self.polygons.create(ring, area)
            self._record("polygon_saved", polygon=polygon_id, area_m2=round(area, 2))
            return polygon_id

    def reset(self) -> None:
        # clears the saved polygons as well as the draft
        with self.lock:
            self.editor.clear()
            self.polygons.reset()
            self.selection = None
            self._record("reset")
            logger.info("Workspace reset")

    def delete_polygon(self, polygon_id: str) -> bool:
        with self.lock:
            deleted = self.polygons.delete_by_id(polygon_id)
            if deleted:
                if isinstance(self.selection, ActiveSavedPolygon) and self.selection.polygon_id == polygon_id:
                    self.selection = None
                self._record("polygon_deleted", polygon=polygon_id)
            return deleted

    def set_building_height(self, value: Any) -> float:
        with self.lock:
            self.building_height = clamp_height(value)
            return self.building_height

    def set_view_mode(self, mode: ViewMode) -> ViewMode:
        with self.lock:
            previous = self.mode
            self.mode = mode
            self.selection = None
            if previous is not mode:
                self._record("mode_changed", mode=mode.value, previous=previous.value)
                logger.info("View mode changed | from=%s | to=%s", previous.value, mode.value)
            return self.mode

    def toggle_view_mode(self) -> ViewMode:
        with self.lock:
            return self.set_view_mode(self.mode.next())

    def toggle_3d(self) -> bool:
        with self.lock:
            self.three_d = not self.three_d
            return self.three_d

    # ---- output state ----

    def meshes(self) -> Dict[str, Mesh]:
        with self.lock:
            footprints = {p.id: p.ring for p in self.polygons.list()}
            footprints[DRAFT_MESH_ID] = self.editor.vertices
            height = self.building_height
        meshes: Dict[str, Mesh] = {}
        for polygon_id, ring in footprints.items():
            mesh = build_extrusion(ring, height)
            if mesh is not None:
                meshes[polygon_id] = mesh
        return meshes

    def snapshot(self) -> WorkspaceSnapshot:
        with self.lock:
            draft = DraftView(
                state=self.editor.state.value,
                vertices=self.editor.vertices,
                area=AreaMeasurement.of(self.editor.area),
            )
            polygons = [SavedPolygonView(id=p.id, ring=p.ring, area=p.measurement) for p in self.polygons.list()]
            return WorkspaceSnapshot(
                mode=self.mode,
                three_d=self.three_d,
                building_height=self.building_height,
                selection=self.selection,
                draft=draft,
                polygons=polygons,
                meshes=self.meshes() if self.three_d else None,
            )

    def recent_events(self, limit: int) -> list[dict[str, Any]]:
        with self.lock:
            return list(self.events)[: max(1, limit)]

    def _record(self, kind: str, **details: Any) -> None:
        self.events.appendleft({"timestamp": time.time(), "type": kind, **details})
