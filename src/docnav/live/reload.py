"""WebSocket-based live reload for development mode.

Monitors the section tree file for changes and notifies connected clients
via WebSocket so they refetch the table of contents.
"""

import asyncio
import json
import logging
import weakref
from pathlib import Path

from aiohttp import WSMsgType, web
from watchfiles import Change, awatch

from docnav.core.loader import SectionsLoader

logger = logging.getLogger(__name__)


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between the file system watcher and connected WebSocket
    clients. The loader cache is invalidated before clients are notified.
    """

    def __init__(self, loader: SectionsLoader) -> None:
        """Initialize the live reload manager.

        Args:
            loader: Loader of the watched sections file
        """
        self._loader = loader
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None

    @property
    def sections_file(self) -> Path:
        return self._loader.sections_file

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    @property
    def watching(self) -> bool:
        return self._watch_task is not None

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_files())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            try:
                await self._watch_task
            except asyncio.CancelledError:
                pass
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload.

        Args:
            request: aiohttp request

        Returns:
            WebSocket response
        """
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch the sections file directory and broadcast reload events."""
        watch_dir = self.sections_file.parent
        async for changes in awatch(watch_dir):
            if not any(
                self.is_sections_file(change_type, path_str)
                for change_type, path_str in changes
            ):
                continue

            self._loader.invalidate()
            await self.broadcast_reload()

    def is_sections_file(self, change_type: Change, path_str: str) -> bool:
        """Check if a file change concerns the sections file.

        Args:
            change_type: Kind of change reported by the watcher
            path_str: Changed path

        Returns:
            True for additions and modifications of the sections file
        """
        if change_type == Change.deleted:
            return False
        return Path(path_str).resolve() == self.sections_file.resolve()

    async def broadcast_reload(self) -> None:
        """Broadcast reload event to all connected clients."""
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": str(self.sections_file)})
        logger.info(f"Sections changed, notifying {self.connection_count} client(s)")

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                pass


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket.

    Args:
        manager: LiveReloadManager instance

    Returns:
        List of route definitions
    """
    return [web.get("/ws/live-reload", manager.handle_websocket)]
