from typing import Optional
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.entities.playlist import Playlist


class MemoryPlaylistRepo(PlaylistRepoInterface):
    def __init__(self):
        self.playlists: dict[str, Playlist] = {}

    def get(self, playlist_id: str) -> Optional[Playlist]:
        # Returns the live instance, mutations through it are visible to other callers
        return self.playlists.get(playlist_id)

    def save(self, playlist: Playlist) -> None:
        # Is used both for creating and replacing a playlist
        self.playlists[playlist.id] = playlist

    def delete(self, playlist_id: str) -> bool:
        return self.playlists.pop(playlist_id, None) is not None

    def get_all(self) -> list[Playlist]:
        return list(self.playlists.values())
