"""Data models for cipher requests."""

from dataclasses import dataclass
from enum import Enum


class CipherMode(Enum):
    """Direction of the shift applied by the cipher."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CipherRequest:
    """A single text/key/mode triple submitted for transformation."""

    text: str
    key: str
    mode: CipherMode = CipherMode.ENCRYPT
