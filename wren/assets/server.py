from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from queue import Empty, Queue
from typing import Any, Dict, List, Optional, Set, Tuple

from wren.assets.formats import (
    Format,
    FormatValue,
    ObjFormat,
    ShaderFormat,
    TextureFormat,
)
from wren.assets.handle import AssetHandle
from wren.assets.registry import AssetRegistry
from wren.assets.reload import HotReloadStrategy, Reload
from wren.assets.sources import Source
from wren.types import AssetId

logger = logging.getLogger(__name__)


@dataclass
class AssetUpdate:
    """What changed during one `AssetServer.update()` call."""

    loaded: List[AssetId] = field(default_factory=list)
    reloaded: List[AssetId] = field(default_factory=list)
    failed: List[Tuple[AssetId, Exception, bool]] = field(default_factory=list)


@dataclass(frozen=True)
class _Completed:
    asset_id: AssetId
    reloading: bool
    value: Optional[FormatValue] = None
    error: Optional[Exception] = None


class AssetServer:
    def __init__(self, source: Source, max_workers: int = 2) -> None:
        self.source = source
        self.registry = AssetRegistry()

        # Set by HotReloadBundle. Only assets loaded afterwards get a handle.
        self.hot_reload = False

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="AssetWorker"
        )
        self._loaded_queue: Queue[_Completed] = Queue()
        self._pending: Set[Future] = set()
        self._pending_lock = threading.Lock()

        self._handles: Dict[str, AssetHandle] = {}  # Path -> Handle
        self._paths: Dict[AssetId, str] = {}

        # Main thread only.
        self._reloads: Dict[AssetId, Reload] = {}
        self._in_flight: Dict[AssetId, Reload] = {}

        self._formats: Dict[str, Format] = {
            ".obj": ObjFormat(),
            ".png": TextureFormat(),
            ".jpg": TextureFormat(),
            ".glsl": ShaderFormat(),
            ".frag": ShaderFormat(),
            ".vert": ShaderFormat(),
            ".comp": ShaderFormat(),
        }

    def register_format(self, extension: str, fmt: Format) -> None:
        if not extension.startswith("."):
            raise ValueError(f"Extension must start with '.', got {extension!r}")
        self._formats[extension.lower()] = fmt

    def format_for(self, path: str) -> Format:
        ext = PurePosixPath(path).suffix.lower()
        fmt = self._formats.get(ext)
        if fmt is None:
            raise ValueError(f"No format registered for {ext!r} ({path})")
        return fmt

    def load(self, path: str, options: Any = None) -> AssetHandle:
        """
        Non-blocking load request. Return handle instantly.
        """
        if path in self._handles:
            return self._handles[path]

        fmt = self.format_for(path)
        if options is None:
            options = fmt.default_options()

        handle = AssetHandle.for_path(path)
        self._handles[path] = handle
        self._paths[handle.id] = path

        self._submit(
            self._worker_load, handle.id, path, fmt, options, self.hot_reload
        )
        return handle

    def get(self, handle: AssetHandle) -> Optional[Any]:
        return self.registry.get(handle.id)

    def path_of(self, asset_id: AssetId) -> str:
        return self._paths[asset_id]

    def reload_handle(self, asset_id: AssetId) -> Optional[Reload]:
        """The stored handle for an asset, None if missing or reloading."""
        return self._reloads.get(asset_id)

    def is_reloading(self, asset_id: AssetId) -> bool:
        return asset_id in self._in_flight

    def _submit(self, fn, *args) -> None:
        future = self._executor.submit(fn, *args)
        with self._pending_lock:
            self._pending.add(future)
        future.add_done_callback(self._discard_pending)

    def _discard_pending(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)

    def _worker_load(
        self,
        asset_id: AssetId,
        path: str,
        fmt: Format,
        options: Any,
        create_reload: bool,
    ) -> None:
        """
        Load asset on background thread.
        """
        try:
            value = fmt.import_asset(path, self.source, options, create_reload)
        except Exception as e:
            self._loaded_queue.put(_Completed(asset_id, False, error=e))
        else:
            self._loaded_queue.put(_Completed(asset_id, False, value=value))

    def _worker_reload(self, asset_id: AssetId, reload: Reload) -> None:
        try:
            value = reload.reload()
        except Exception as e:
            self._loaded_queue.put(_Completed(asset_id, True, error=e))
        else:
            self._loaded_queue.put(_Completed(asset_id, True, value=value))

    def update(self, strategy: HotReloadStrategy | None = None) -> AssetUpdate:
        """
        Called on the Main Thread every tick.
        Stores finished imports, then starts reloads of stale assets if the
        strategy says this tick is due.
        """
        result = AssetUpdate()

        while True:
            try:
                done = self._loaded_queue.get_nowait()
            except Empty:
                break
            self._complete(done, result)

        if strategy is not None and strategy.is_due():
            self._start_reloads()

        return result

    def _complete(self, done: _Completed, result: AssetUpdate) -> None:
        asset_id = done.asset_id
        path = self._paths[asset_id]

        if done.error is not None:
            if done.reloading:
                # Keep the old data and check again on a later due tick.
                self._reloads[asset_id] = self._in_flight.pop(asset_id)
                logger.error(
                    "Failed to reload %s, keeping previous version",
                    path,
                    exc_info=done.error,
                )
            else:
                logger.error("Failed to load %s", path, exc_info=done.error)
            result.failed.append((asset_id, done.error, done.reloading))
            return

        assert done.value is not None
        self.registry.store(asset_id, done.value.data)
        if done.value.reload is not None:
            self._reloads[asset_id] = done.value.reload

        if done.reloading:
            self._in_flight.pop(asset_id, None)
            logger.info(
                "Reloaded %s (version %d)", path, self.registry.version(asset_id)
            )
            result.reloaded.append(asset_id)
        else:
            result.loaded.append(asset_id)

    def _start_reloads(self) -> None:
        for asset_id, reload in list(self._reloads.items()):
            if not reload.needs_reload():
                continue

            try:
                kept = reload.duplicate()
            except Exception:
                # The handle stays stored, so a later due tick tries again.
                logger.exception(
                    "Cannot duplicate reload handle for %s", reload.name()
                )
                continue

            logger.info(
                "Reloading %s (format: %s)", reload.name(), reload.format_name()
            )
            del self._reloads[asset_id]
            self._in_flight[asset_id] = kept
            self._submit(self._worker_reload, asset_id, reload)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until queued imports finish. Returns False on timeout."""
        with self._pending_lock:
            pending = list(self._pending)
        _, not_done = wait_futures(pending, timeout=timeout)
        return not not_done

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
