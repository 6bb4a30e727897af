import re

from app.domain.entities.playlist import Playlist
from app.domain.services_interfaces.id_generator import IdGeneratorInterface
from infrastructure.repositories.playlist.memory_repo import MemoryPlaylistRepo
from infrastructure.services.id_service import SequentialIdGenerator, UuidIdGenerator


def test_uuid_generator_produces_unique_uuid_strings():
    generator = UuidIdGenerator()
    ids = {generator.generate() for _ in range(100)}
    assert len(ids) == 100
    assert all(re.fullmatch(r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[0-9a-f]{4}-[0-9a-f]{12}", value) for value in ids)


def test_sequential_generator_is_deterministic():
    generator = SequentialIdGenerator(prefix='pl', start=7)
    assert isinstance(generator, IdGeneratorInterface)
    assert [generator.generate() for _ in range(3)] == ["pl-7", "pl-8", "pl-9"]


def test_memory_repo_roundtrip():
    repo = MemoryPlaylistRepo()
    first = Playlist("One", id_generator=SequentialIdGenerator(prefix='one'))
    second = Playlist("Two", id_generator=SequentialIdGenerator(prefix='two'))
    repo.save(first)
    repo.save(second)
    assert repo.get("one-1") is first
    assert repo.get("missing") is None
    assert repo.get_all() == [first, second]
    assert repo.delete("one-1") is True
    assert repo.delete("one-1") is False
    assert repo.get_all() == [second]


def test_sequential_generator_defaults():
    generator = SequentialIdGenerator()
    assert [generator.generate(), generator.generate()] == ["id-1", "id-2"]
