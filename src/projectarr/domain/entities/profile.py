"""User profile: session and the authoritative installed-addon list."""

from __future__ import annotations

from dataclasses import dataclass, field

from projectarr.domain.entities.addon import Descriptor


@dataclass(frozen=True)
class User:
    id: str
    email: str
    avatar: str | None = None


@dataclass(frozen=True)
class Auth:
    key: str
    user: User


@dataclass(frozen=True)
class ProfileSettings:
    interface_language: str = "eng"
    streaming_server_url: str = "http://127.0.0.1:11470/"
    binge_watching: bool = False
    play_in_background: bool = True
    hardware_decoding: bool = True
    audio_language: str = "eng"
    subtitles_language: str = "eng"


@dataclass(frozen=True)
class Profile:
    auth: Auth | None = None
    addons: tuple[Descriptor, ...] = ()
    settings: ProfileSettings = field(default_factory=ProfileSettings)
