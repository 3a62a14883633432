"""Streaming server projection."""

from __future__ import annotations

from projectarr.application.context import ProjectionContext
from projectarr.application.views import View, project_content
from projectarr.domain.entities.addon import ResourcePath
from projectarr.domain.entities.streaming_server import StreamingServer
from projectarr.domain.ports.deep_links import DeepLinks


def project_streaming_server(state: StreamingServer, ctx: ProjectionContext) -> View:
    """Pass the server state through; a ready torrent gains meta deep links.

    ``torrent`` is ``(info_hash, Ready((path, deep_links)))`` once the
    torrent's meta path is known. Loading and Err states pass unchanged.
    """

    def _with_links(path: ResourcePath) -> tuple[ResourcePath, DeepLinks]:
        return path, ctx.links.meta_item_for_path(path)

    torrent = None
    if state.torrent is not None:
        info_hash, loadable = state.torrent
        torrent = (info_hash, project_content(loadable, _with_links))

    return {
        "selected": state.selected,
        "settings": state.settings,
        "baseUrl": state.base_url,
        "playbackDevices": state.playback_devices,
        "torrent": torrent,
        "statistics": state.statistics,
    }
