import re
from collections.abc import Iterator
from typing import Final

from naive_rhythm.config import BPM_KEYWORD, MAGIC, U32_MAX
from naive_rhythm.domain.errors import BadBpmError, BadKeyError, BadMagicError
from naive_rhythm.domain.models import RhythmInput


class RhythmParser:
    """Converte o documento `naive-rhythm` em um `RhythmInput`.

    Formato: `naive-rhythm bpm <tempo>` seguido de marcações em ms, todos
    separados por espaço ou quebra de linha.
    """

    TOKEN_DELIMITER: Final[re.Pattern[str]] = re.compile(r'[ \n]')
    UNSIGNED_INTEGER: Final[re.Pattern[str]] = re.compile(r'\+?[0-9]+')

    def parse(self, text: str) -> RhythmInput:
        tokens: Iterator[str] = iter(self.TOKEN_DELIMITER.split(text))

        self._read_magic(tokens)
        tempo: int = self._read_tempo(tokens)
        keys: list[int] = self._read_keys(tokens)

        return RhythmInput(tempo=tempo, keys=tuple(keys))

    def _read_magic(self, tokens: Iterator[str]) -> None:
        magic = next(tokens, None)
        if magic != MAGIC:
            raise BadMagicError(magic)

    def _read_tempo(self, tokens: Iterator[str]) -> int:
        keyword = next(tokens, None)
        if keyword != BPM_KEYWORD:
            raise BadBpmError(keyword)

        tempo_str = next(tokens, None)
        if tempo_str is None:
            raise BadBpmError()

        tempo = self._parse_unsigned(tempo_str)
        if tempo is None:
            raise BadBpmError(tempo_str)
        return tempo

    def _read_keys(self, tokens: Iterator[str]) -> list[int]:
        """Lê as marcações restantes, ignorando tokens vazios."""
        keys: list[int] = []

        # Os três primeiros tokens são o cabeçalho
        for index, key_str in enumerate(tokens, start=3):
            if not key_str:
                continue

            key = self._parse_unsigned(key_str)
            if key is None:
                raise BadKeyError(key_str, index)
            keys.append(key)

        return keys

    def _parse_unsigned(self, token: str) -> int | None:
        if not self.UNSIGNED_INTEGER.fullmatch(token):
            return None

        value = int(token)
        if value > U32_MAX:
            return None
        return value


def parse(text: str) -> RhythmInput:
    """Atalho para `RhythmParser().parse`."""
    return RhythmParser().parse(text)
