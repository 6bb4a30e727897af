import pytest

from app.domain.entities.playlist import Playlist
from app.domain.entities.song import Song
from infrastructure.services.id_service import SequentialIdGenerator


@pytest.fixture
def id_generator():
    return SequentialIdGenerator(prefix='test')


@pytest.fixture
def songs():
    return {
        'a': Song(title="Africa", artist="Toto", duration=180),
        'b': Song(title="Bohemian Rhapsody", artist="Queen", duration=200),
        'c': Song(title="Creep", artist="Radiohead", duration=239),
        'd': Song(title="Dreams", artist="Fleetwood Mac", duration=257),
    }


@pytest.fixture
def playlist(id_generator):
    return Playlist("Road Trip", id_generator=id_generator)
