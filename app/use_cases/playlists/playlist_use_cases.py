import logging
from typing import Optional
from app.domain.repositories_interfaces.playlist_repo import PlaylistRepoInterface
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from app.domain.entities.playlist import Playlist
from app.domain.entities.song import Song
from app.domain.exceptions import PlaylistNotFoundError
from app.use_cases.utils import log_errors


logger = logging.getLogger('use_cases')


class PlaylistUseCases:
    def __init__(self, repo: PlaylistRepoInterface, id_generator: IdGeneratorInterface):
        self.repo = repo
        self.id_generator = id_generator

    @log_errors
    def create(self, name: str) -> Playlist:
        """
        Creates a new empty playlist and registers it in the repository.

        :param name: The name of the playlist.
        :return: The created Playlist.
        """
        playlist = Playlist(name, id_generator=self.id_generator)
        self.repo.save(playlist)
        logger.info(f"CREATE PLAYLIST {playlist.id}")
        return playlist

    @log_errors
    def get(self, playlist_id: str) -> Playlist:
        """
        Retrieves a playlist by its ID.

        :param playlist_id: The unique identifier for the playlist.
        :return: The Playlist instance.
        :raises PlaylistNotFoundError: If no playlist has this ID.
        """
        return self._get(playlist_id)

    @log_errors
    def delete(self, playlist_id: str) -> bool:
        deleted = self.repo.delete(playlist_id)
        if deleted:
            logger.info(f"DELETE PLAYLIST {playlist_id}")
        return deleted

    @log_errors
    def list_playlists(self) -> list[Playlist]:
        """
        Returns every registered playlist.

        :return: A new list of Playlist instances, in registration order.
        """
        return self.repo.get_all()

    @log_errors
    def add_song(self, playlist_id: str, song: Optional[Song]) -> Playlist:
        playlist = self._get(playlist_id)
        playlist.add_song(song)
        logger.info(f"ADD SONG TO PLAYLIST {playlist_id}")
        return playlist

    @log_errors
    def insert_song(self, playlist_id: str, song: Optional[Song], pos: int) -> Playlist:
        playlist = self._get(playlist_id)
        playlist.insert_song(song, pos)
        logger.info(f"INSERT SONG INTO PLAYLIST {playlist_id} AT {pos}")
        return playlist

    @log_errors
    def remove_song(self, playlist_id: str, song: Optional[Song]) -> bool:
        removed = self._get(playlist_id).remove_song(song)
        logger.info(f"REMOVE SONG FROM PLAYLIST {playlist_id}: {removed}")
        return removed

    @log_errors
    def search(self, playlist_id: str, keyword: str) -> list[Song]:
        return self._get(playlist_id).search(keyword)

    @log_errors
    def like(self, playlist_id: str, user_id: str) -> bool:
        liked = self._get(playlist_id).like(user_id)
        logger.info(f"LIKE PLAYLIST {playlist_id}", extra={'user': user_id})
        return liked

    @log_errors
    def unlike(self, playlist_id: str, user_id: str) -> bool:
        unliked = self._get(playlist_id).unlike(user_id)
        logger.info(f"UNLIKE PLAYLIST {playlist_id}", extra={'user': user_id})
        return unliked

    @log_errors
    def add_comment(self, playlist_id: str, user_id: str, text: str) -> str:
        """
        Adds a comment to a playlist on behalf of a user.

        :param playlist_id: The unique identifier of the playlist.
        :param user_id: The ID of the user writing the comment.
        :param text: The comment text.
        :return: The ID of the new comment.
        """
        comment_id = self._get(playlist_id).add_comment(user_id, text)
        logger.info(f"ADD COMMENT {comment_id} TO PLAYLIST {playlist_id}", extra={'user': user_id})
        return comment_id

    @log_errors
    def remove_comment(self, playlist_id: str, comment_id: Optional[str]) -> bool:
        removed = self._get(playlist_id).remove_comment(comment_id)
        logger.info(f"REMOVE COMMENT {comment_id} FROM PLAYLIST {playlist_id}: {removed}")
        return removed

    def _get(self, playlist_id: str) -> Playlist:
        playlist = self.repo.get(playlist_id)
        if playlist is None:
            raise PlaylistNotFoundError(f"playlist {playlist_id} not found")
        return playlist
