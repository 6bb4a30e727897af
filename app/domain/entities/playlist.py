import logging
from typing import Optional
from pydantic import BaseModel
from app.domain.entities.song import Song
from app.domain.entities.comment import Comment
from app.domain.exceptions import InvalidArgumentError
from app.domain.services_interfaces.id_generator import IdGeneratorInterface


logger = logging.getLogger('domain')

"""
Playlist Aggregate:
1. id (str): Unique identifier taken from the id generator at construction. Read-only.
2. name (str): Name of the playlist. Read-only, there is no rename.
3. songs (list[Song]): Ordered songs, duplicates allowed. Order is the insertion/manipulation order.
4. liked_by_users (set[str]): Identifiers of users who liked the playlist.
5. comments (list[Comment]): All comments in the order they were added.
6. comments_by_user (dict[str, list[Comment]]): Comments grouped by author, kept in sync with comments.
A user without comments has no key in comments_by_user.

Not thread-safe: callers sharing an instance between threads must serialise access themselves.
"""
class Playlist:
    def __init__(self, name: str, id_generator: IdGeneratorInterface):
        self._id_generator = id_generator
        self._id = self._id_generator.generate()
        self._name = name
        self._songs: list[Song] = []
        self._liked_by_users: set[str] = set()
        self._comments: list[Comment] = []
        self._comments_by_user: dict[str, list[Comment]] = {}

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def songs(self) -> tuple[Song, ...]:
        return tuple(self._songs)

    def size(self) -> int:
        return len(self._songs)

    def __len__(self) -> int:
        return len(self._songs)

    def __repr__(self):
        return f"Playlist(id='{self._id}', name='{self._name}', songs={len(self._songs)})"

    def total_duration_seconds(self) -> int:
        return sum(song.duration for song in self._songs)

    def add_song(self, song: Optional[Song]) -> None:
        if song is None:
            return
        self._songs.append(song)

    def insert_song(self, song: Optional[Song], pos: int) -> None:
        """
        Inserts a song at the given position.

        Positions are clamped: anything at or below 0 goes to the head,
        anything at or past the current size goes to the tail.

        :param song: The Song to insert. None is ignored.
        :param pos: Target index in the playlist.
        """
        if song is None:
            return
        if pos <= 0:
            self._songs.insert(0, song)
        elif pos >= len(self._songs):
            self._songs.append(song)
        else:
            self._songs.insert(pos, song)

    def remove_song(self, song: Optional[Song]) -> bool:
        if song is None:
            return False
        try:
            self._songs.remove(song)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._songs.clear()

    def sort_songs(self) -> None:
        # list.sort is stable, equal titles keep their relative order
        self._songs.sort()

    def search(self, keyword: str) -> list[Song]:
        """
        Finds songs whose title or artist contains the keyword, ignoring case.

        :param keyword: Substring to look for. An empty keyword matches nothing.
        :return: Matching songs in playlist order.
        :raises InvalidArgumentError: If keyword is None.
        """
        if keyword is None:
            raise InvalidArgumentError("keyword invalid")
        if not keyword:
            return []
        key = keyword.casefold()
        return [
            song for song in self._songs
            if key in song.title.casefold() or key in song.artist.casefold()
        ]

    def like(self, user_id: str) -> bool:
        self._validate_user_id(user_id)
        if user_id in self._liked_by_users:
            return False
        self._liked_by_users.add(user_id)
        logger.debug("LIKE", extra={'user': user_id})
        return True

    def unlike(self, user_id: str) -> bool:
        self._validate_user_id(user_id)
        if user_id not in self._liked_by_users:
            return False
        self._liked_by_users.remove(user_id)
        logger.debug("UNLIKE", extra={'user': user_id})
        return True

    def likes_count(self) -> int:
        return len(self._liked_by_users)

    def get_liked_by_users(self) -> frozenset[str]:
        return frozenset(self._liked_by_users)

    def add_comment(self, user_id: str, text: str) -> str:
        """
        Adds a comment from a user and indexes it under that user.

        :param user_id: Author of the comment. Cannot be None or empty.
        :param text: Content of the comment. Cannot be None, can be empty.
        :return: Id of the new comment.
        :raises InvalidArgumentError: If user_id or text is invalid.
        """
        self._validate_user_id(user_id)
        if text is None:
            raise InvalidArgumentError("text invalid")
        comment = Comment(id=self._id_generator.generate(), user_id=user_id, text=text)
        self._comments.append(comment)
        self._comments_by_user.setdefault(user_id, []).append(comment)
        logger.debug(f"ADD COMMENT {comment.id}", extra={'user': user_id})
        return comment.id

    def remove_comment(self, comment_id: Optional[str]) -> bool:
        """
        Removes a comment by id from the global list and from its author's entry.

        The author's entry is dropped once it holds no comments.

        :param comment_id: Id returned by add_comment. None is ignored.
        :return: True if a comment was removed, False otherwise.
        """
        if comment_id is None:
            return False
        for index, comment in enumerate(self._comments):
            if comment.id == comment_id:
                del self._comments[index]
                user_comments = self._comments_by_user.get(comment.user_id)
                if user_comments is not None:
                    user_comments[:] = [c for c in user_comments if c.id != comment_id]
                    if not user_comments:
                        del self._comments_by_user[comment.user_id]
                logger.debug(f"REMOVE COMMENT {comment_id}", extra={'user': comment.user_id})
                return True
        return False

    def get_comments(self) -> tuple[Comment, ...]:
        return tuple(self._comments)

    def get_comments_by_user(self, user_id: str) -> Optional[tuple[Comment, ...]]:
        # None means the user has no comments at all, there are no empty entries
        user_comments = self._comments_by_user.get(user_id)
        if user_comments is None:
            return None
        return tuple(user_comments)

    def comments_count(self) -> int:
        return len(self._comments)

    def to_snapshot(self) -> 'PlaylistSnapshot':
        return PlaylistSnapshot(
            id=self._id,
            name=self._name,
            songs=list(self._songs),
            liked_by_users=sorted(self._liked_by_users),
            comments=list(self._comments),
        )

    @staticmethod
    def _validate_user_id(user_id: Optional[str]) -> None:
        if not user_id:
            raise InvalidArgumentError("userId invalid")


"""
PlaylistSnapshot:
Detached, serialisable copy of a playlist's state. Changing it does not affect the playlist.
"""
class PlaylistSnapshot(BaseModel):
    id: str
    name: str
    songs: list[Song] = []
    liked_by_users: list[str] = []
    comments: list[Comment] = []
