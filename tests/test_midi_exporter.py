import io

import mido
import pytest

from naive_rhythm.domain.errors import OutputError
from naive_rhythm.domain.models import MidiSettings, RhythmOutput
from naive_rhythm.infrastructure.midi_exporter import MIDIExporter

HEADER = bytes.fromhex('4d546864 00000006 0001 0002 01e0')
META_TRACK_120 = bytes.fromhex(
    '4d54726b 00000017'
    '00 ff0300'
    '00 ff5804 04021808'
    '00 ff5103 07a120'
    '00 ff2f00'
)


def _read(data: bytes) -> mido.MidiFile:
    return mido.MidiFile(file=io.BytesIO(data))


def test_build_is_byte_exact():
    data = MIDIExporter().build(RhythmOutput(tempo=120, beats=(0, 1)))

    note_track = bytes.fromhex(
        '4d54726b 00000016'
        '00 903c7f'
        '8740 803c00'
        '00 903c7f'
        '8740 803c00'
        '00 ff2f00'
    )
    assert data == HEADER + META_TRACK_120 + note_track


def test_empty_beats_only_end_the_track():
    data = MIDIExporter().build(RhythmOutput(tempo=120, beats=()))

    assert data == HEADER + META_TRACK_120 + bytes.fromhex('4d54726b 00000004 00ff2f00')
    midi = _read(data)
    assert [msg.type for msg in midi.tracks[1]] == ['end_of_track']


def test_structure_of_generated_file():
    beats = (2, 3, 7, 8, 20)
    midi = _read(MIDIExporter().build(RhythmOutput(tempo=100, beats=beats)))

    assert midi.type == 1
    assert midi.ticks_per_beat == 480
    assert len(midi.tracks) == 2

    meta = midi.tracks[0]
    assert [msg.type for msg in meta] == [
        'track_name',
        'time_signature',
        'set_tempo',
        'end_of_track',
    ]
    assert all(msg.time == 0 for msg in meta)
    assert meta[0].name == ''
    assert (meta[1].numerator, meta[1].denominator) == (4, 4)
    assert (meta[1].clocks_per_click, meta[1].notated_32nd_notes_per_beat) == (24, 8)
    assert meta[2].tempo == 600_000

    notes = midi.tracks[1]
    assert len(notes) == 2 * len(beats) + 1
    assert [msg.type for msg in notes[:-1]] == ['note_on', 'note_off'] * len(beats)
    assert notes[-1].type == 'end_of_track'
    assert {(msg.note, msg.channel) for msg in notes[:-1]} == {(60, 0)}
    assert {msg.velocity for msg in notes[:-1:2]} == {127}
    assert {msg.velocity for msg in notes[1:-1:2]} == {0}


def test_note_deltas():
    beats = (3, 4, 9)
    notes = MIDIExporter().build_file(RhythmOutput(tempo=100, beats=beats)).tracks[1]

    # 115200 / 100 = 1152 ticks por batida
    assert [msg.time for msg in notes] == [3456, 1152, 0, 5760, 0, 1152, 0]


def test_deltas_use_floor_division():
    notes = MIDIExporter().build_file(RhythmOutput(tempo=7, beats=(1, 2))).tracks[1]

    assert [msg.time for msg in notes] == [16457, 16457, 0, 16457, 0]


def test_custom_settings():
    settings = MidiSettings(note=36, channel=9)
    midi = MIDIExporter(settings).build_file(RhythmOutput(tempo=120, beats=(0,)))
    note_on = midi.tracks[1][0]

    assert (note_on.note, note_on.channel) == (36, 9)


@pytest.mark.parametrize('tempo', [0, 3])
def test_tempo_that_cannot_be_written(tempo):
    with pytest.raises(OutputError):
        MIDIExporter().build(RhythmOutput(tempo=tempo, beats=(0,)))


def test_lowest_writable_tempo():
    midi = _read(MIDIExporter().build(RhythmOutput(tempo=4, beats=(0,))))
    assert midi.tracks[0][2].tempo == 15_000_000


def test_delta_overflow_is_an_output_error():
    with pytest.raises(OutputError):
        MIDIExporter().build(RhythmOutput(tempo=4, beats=(0, 10_000)))


def test_large_gap_within_limit():
    data = MIDIExporter().build(RhythmOutput(tempo=60_000, beats=(0, 100_000)))
    assert _read(data).tracks[1][1].time == 192_000
