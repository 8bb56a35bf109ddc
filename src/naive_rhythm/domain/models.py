from dataclasses import dataclass

from naive_rhythm.config import (
    CHANNEL,
    CLOCKS_PER_CLICK,
    MIDI_FILE_TYPE,
    NOTATED_32ND_NOTES_PER_BEAT,
    NOTE_PITCH,
    TICK_SCALE,
    TICKS_PER_BEAT,
    TIME_SIGNATURE_DENOMINATOR,
    TIME_SIGNATURE_NUMERATOR,
    VELOCITY_OFF,
    VELOCITY_ON,
)


@dataclass(frozen=True)
class RhythmInput:
    """Tempo e marcações de teclas (em ms) lidos do texto de entrada."""

    tempo: int
    keys: tuple[int, ...] = ()


@dataclass(frozen=True)
class RhythmOutput:
    """Índices de batida quantizados, em ordem estritamente crescente."""

    tempo: int
    beats: tuple[int, ...] = ()


@dataclass(frozen=True)
class MidiSettings:
    """Parâmetros fixos usados na geração do arquivo MIDI."""

    ticks_per_beat: int = TICKS_PER_BEAT
    midi_type: int = MIDI_FILE_TYPE
    note: int = NOTE_PITCH
    velocity_on: int = VELOCITY_ON
    velocity_off: int = VELOCITY_OFF
    channel: int = CHANNEL
    numerator: int = TIME_SIGNATURE_NUMERATOR
    denominator: int = TIME_SIGNATURE_DENOMINATOR
    clocks_per_click: int = CLOCKS_PER_CLICK
    notated_32nd_notes_per_beat: int = NOTATED_32ND_NOTES_PER_BEAT
    tick_scale: int = TICK_SCALE
