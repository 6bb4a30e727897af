from typing import Optional
from app.domain.entities.playlist import Playlist
from abc import ABC, abstractmethod


class PlaylistRepoInterface(ABC):
    @abstractmethod
    def get(self, playlist_id: str) -> Optional[Playlist]:
        raise NotImplementedError

    @abstractmethod
    def save(self, playlist: Playlist) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, playlist_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_all(self) -> list[Playlist]:
        raise NotImplementedError
