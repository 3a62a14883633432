"""Streaming server status as resolved by the core."""

from __future__ import annotations

from dataclasses import dataclass

from projectarr.domain.entities.addon import ResourceError, ResourcePath
from projectarr.domain.entities.loadable import Loadable


@dataclass(frozen=True)
class StatisticsRequest:
    info_hash: str
    file_idx: int


@dataclass(frozen=True)
class StreamingServerSelected:
    transport_url: str
    statistics: StatisticsRequest | None = None


@dataclass(frozen=True)
class StreamingServerSettings:
    app_path: str
    cache_root: str
    server_version: str
    cache_size: float | None = None
    bt_max_connections: int = 55
    bt_handshake_timeout: int = 20_000
    bt_request_timeout: int = 4_000
    bt_download_speed_soft_limit: float = 1_677_721.6
    bt_download_speed_hard_limit: float = 2_621_440.0
    bt_min_peers_for_stable: int = 5


@dataclass(frozen=True)
class PlaybackDevice:
    id: str
    name: str
    type: str  # "chromecast", "external", ...


@dataclass(frozen=True)
class Statistics:
    name: str
    info_hash: str
    download_speed: float = 0.0
    upload_speed: float = 0.0
    downloaded: int = 0
    uploaded: int = 0
    peers: int = 0
    unchoked: int = 0
    queued: int = 0
    unique: int = 0
    connection_tries: int = 0
    peer_search_running: bool = False
    stream_len: int = 0
    stream_name: str = ""
    stream_progress: float = 0.0
    swarm_connections: int = 0
    swarm_paused: bool = False
    swarm_size: int = 0


@dataclass(frozen=True)
class StreamingServer:
    selected: StreamingServerSelected
    settings: Loadable[StreamingServerSettings, ResourceError]
    base_url: Loadable[str, ResourceError]
    playback_devices: Loadable[tuple[PlaybackDevice, ...], ResourceError]
    # (info hash, meta path of the created torrent)
    torrent: tuple[str, Loadable[ResourcePath, ResourceError]] | None = None
    statistics: Loadable[Statistics, ResourceError] | None = None
