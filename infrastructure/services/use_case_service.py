from typing import Optional
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.use_cases.playlists.playlist_use_cases import PlaylistUseCases
from infrastructure.repositories.playlist.memory_repo import MemoryPlaylistRepo
from infrastructure.services.id_service import UuidIdGenerator


# Wires concrete repositories and services into the use cases.
def build_playlist_use_cases(repo: Optional[PlaylistRepoInterface] = None,
                             id_generator: Optional[IdGeneratorInterface] = None) -> PlaylistUseCases:
    return PlaylistUseCases(
        repo=repo or MemoryPlaylistRepo(),
        id_generator=id_generator or UuidIdGenerator(),
    )
