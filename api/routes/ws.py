import asyncio
import logging
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from core import state
from core.config import Settings

logger = logging.getLogger("zoneplot.api.ws")

router = APIRouter()

@router.websocket("/ws")
async def ws_workspace(ws: WebSocket):
    settings = Settings()
    origin = ws.headers.get("origin", "")
    if origin not in settings.allowed_origins:
        await ws.close(code=1008); return

    await ws.accept()
    try:
        while not state.stop_flag:
            await ws.send_text(state.workspace.snapshot().model_dump_json())
            await asyncio.sleep(settings.WS_PUSH_INTERVAL)
    except WebSocketDisconnect:
        return
    except Exception as exc:
        logger.warning("Workspace push stopped | origin=%s | error=%r", origin, exc)
        try:
            await ws.close()
        except RuntimeError as close_exc:
            # already closed by the peer
            logger.debug("Close after failed push ignored | error=%r", close_exc)
