import uuid
from app.domain.services_interfaces.id_generator import IdGeneratorInterface


class UuidIdGenerator(IdGeneratorInterface):
    def generate(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator(IdGeneratorInterface):
    # Deterministic ids "<prefix>-<n>", e.g. "id-1", "id-2" with the defaults; used in tests
    def __init__(self, prefix: str = 'id', start: int = 1):
        self.prefix = prefix
        self.counter = start

    def generate(self) -> str:
        value = f"{self.prefix}-{self.counter}"
        self.counter += 1
        return value
