import io
import logging

import mido  # pyright: ignore[reportMissingTypeStubs]

from naive_rhythm.config import MAX_DELTA_TICKS, MAX_MIDI_TEMPO, US_PER_MINUTE
from naive_rhythm.domain.errors import OutputError
from naive_rhythm.domain.models import MidiSettings, RhythmOutput

logger = logging.getLogger(__name__)


class MIDIExporter:
    """Gera o arquivo MIDI de duas faixas a partir das batidas quantizadas."""

    def __init__(self, settings: MidiSettings | None = None) -> None:
        self.settings: MidiSettings = settings or MidiSettings()

    def build(self, output: RhythmOutput) -> bytes:
        """Serializar o ritmo em bytes MIDI padrão."""
        midi: mido.MidiFile = self.build_file(output)
        buffer = io.BytesIO()

        try:
            midi.save(file=buffer)
        except (OSError, ValueError, TypeError) as exc:
            raise OutputError() from exc

        data = buffer.getvalue()
        logger.debug('MIDI gerado: %d bytes, %d batidas', len(data), len(output.beats))
        return data

    def build_file(self, output: RhythmOutput) -> mido.MidiFile:
        """Montar o `MidiFile` com a faixa de metadados e a de notas."""
        if output.tempo <= 0:
            raise OutputError(f'tempo must be positive, got {output.tempo}')

        midi = mido.MidiFile(
            type=self.settings.midi_type,
            ticks_per_beat=self.settings.ticks_per_beat,
        )
        midi.tracks.append(self._meta_track(output.tempo))
        midi.tracks.append(self._note_track(output))
        return midi

    def _meta_track(self, tempo: int) -> mido.MidiTrack:
        micros_per_beat = US_PER_MINUTE // tempo
        if not 0 < micros_per_beat <= MAX_MIDI_TEMPO:
            raise OutputError(f'tempo {tempo} bpm does not fit a MIDI tempo event')

        return mido.MidiTrack(
            [
                mido.MetaMessage('track_name', name='', time=0),
                mido.MetaMessage(
                    'time_signature',
                    numerator=self.settings.numerator,
                    denominator=self.settings.denominator,
                    clocks_per_click=self.settings.clocks_per_click,
                    notated_32nd_notes_per_beat=self.settings.notated_32nd_notes_per_beat,
                    time=0,
                ),
                mido.MetaMessage('set_tempo', tempo=micros_per_beat, time=0),
                mido.MetaMessage('end_of_track', time=0),
            ]
        )

    def _note_track(self, output: RhythmOutput) -> mido.MidiTrack:
        """Um par note_on/note_off por batida, seguido do fim de faixa."""
        track = mido.MidiTrack()
        beats = output.beats
        count: int = len(beats)

        for i in range(count):
            on_gap = beats[0] if i == 0 else 0
            off_gap = 1 if i == count - 1 else beats[i + 1] - beats[i]

            track.append(
                mido.Message(
                    'note_on',
                    channel=self.settings.channel,
                    note=self.settings.note,
                    velocity=self.settings.velocity_on,
                    time=self._delta_ticks(on_gap, output.tempo),
                )
            )
            track.append(
                mido.Message(
                    'note_off',
                    channel=self.settings.channel,
                    note=self.settings.note,
                    velocity=self.settings.velocity_off,
                    time=self._delta_ticks(off_gap, output.tempo),
                )
            )

        track.append(mido.MetaMessage('end_of_track', time=0))
        return track

    def _delta_ticks(self, beat_gap: int, tempo: int) -> int:
        ticks = beat_gap * self.settings.tick_scale // tempo
        if ticks > MAX_DELTA_TICKS:
            raise OutputError(f'delta of {ticks} ticks exceeds the MIDI limit')
        return ticks
