from pydantic import BaseModel, ConfigDict, Field


"""
Song Entity:
1. title (str): The title of the song. Songs are ordered by title.
2. artist (str): The artist(s) performing the song.
3. duration (int): Length of the song in seconds. Cannot be negative.
Songs are immutable values, a playlist only keeps references to them.
"""
class Song(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    artist: str
    duration: int = Field(default=0, ge=0)

    def __lt__(self, other: 'Song') -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.title < other.title

    def __le__(self, other: 'Song') -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.title <= other.title

    def __gt__(self, other: 'Song') -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.title > other.title

    def __ge__(self, other: 'Song') -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.title >= other.title
