from collections.abc import Iterable

from naive_rhythm.config import MAX_TEMPO, MIN_TEMPO, MS_PER_MINUTE
from naive_rhythm.domain.errors import TempoOutOfRangeError
from naive_rhythm.domain.models import RhythmInput, RhythmOutput


def beat_period_ms(tempo: int) -> int:
    """Duração de uma batida em ms, truncada.

    Tempos fora de `MIN_TEMPO..=MAX_TEMPO` dariam divisão por zero aqui
    (tempo 0) ou um período nulo (tempo acima de 60000), por isso são
    rejeitados com `TempoOutOfRangeError`.
    """
    if not MIN_TEMPO <= tempo <= MAX_TEMPO:
        raise TempoOutOfRangeError(tempo, MIN_TEMPO, MAX_TEMPO)
    return MS_PER_MINUTE // tempo


def nearest_beat(key: int, period: int) -> int:
    """Índice da fronteira de batida mais próxima; empate fica com a anterior."""
    lower = key // period
    upper = lower + 1

    # lower * period <= key <= upper * period, então nenhuma diferença é negativa
    if key - lower * period <= upper * period - key:
        return lower
    return upper


def dedupe_sorted(values: Iterable[int]) -> list[int]:
    """Remove repetições adjacentes de uma sequência já ordenada."""
    unique: list[int] = []
    previous: int | None = None

    for value in values:
        if value != previous:
            unique.append(value)
        previous = value

    return unique


def solve(rhythm: RhythmInput) -> RhythmOutput:
    """Quantiza as marcações em índices de batida ordenados e sem repetição."""
    period = beat_period_ms(rhythm.tempo)

    beats = sorted(nearest_beat(key, period) for key in rhythm.keys)

    return RhythmOutput(tempo=rhythm.tempo, beats=tuple(dedupe_sorted(beats)))
