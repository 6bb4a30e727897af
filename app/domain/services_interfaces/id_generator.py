from abc import ABC, abstractmethod


class IdGeneratorInterface(ABC):
    @abstractmethod
    def generate(self) -> str:
        """
        Produces a new identifier that was never returned before by this generator.

        :return: A non-empty string identifier
        """
        pass
