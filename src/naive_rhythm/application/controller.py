import logging
from pathlib import Path

from naive_rhythm.domain.errors import (
    OutputError,
    ParseError,
    PipelineStage,
    StageError,
    TempoOutOfRangeError,
)
from naive_rhythm.domain.models import RhythmInput, RhythmOutput
from naive_rhythm.domain.parser import RhythmParser
from naive_rhythm.domain.quantizer import solve
from naive_rhythm.infrastructure.midi_exporter import MIDIExporter

logger = logging.getLogger(__name__)


class RhythmController:
    def __init__(self) -> None:
        self.parser: RhythmParser = RhythmParser()
        self.exporter: MIDIExporter = MIDIExporter()

    def convert(self, text: str) -> bytes:
        """Analisa o texto, quantiza as marcações e gera os bytes MIDI."""
        try:
            rhythm: RhythmInput = self.parser.parse(text)
        except ParseError as exc:
            raise StageError(PipelineStage.PARSE) from exc
        logger.debug('Entrada: %d bpm, %d marcações', rhythm.tempo, len(rhythm.keys))

        try:
            output: RhythmOutput = solve(rhythm)
        except TempoOutOfRangeError as exc:
            raise StageError(PipelineStage.QUANTIZE) from exc
        logger.debug('Batidas quantizadas: %d', len(output.beats))

        try:
            return self.exporter.build(output)
        except OutputError as exc:
            raise StageError(PipelineStage.BUILD) from exc

    def convert_file(self, input_path: Path, output_path: Path) -> int:
        """Converte o arquivo de texto e grava o MIDI; retorna o tamanho gravado."""
        try:
            text = input_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            raise StageError(PipelineStage.READ) from exc

        data = self.convert(text)

        # O arquivo só é aberto depois que o buffer inteiro foi gerado
        try:
            output_path.write_bytes(data)
        except OSError as exc:
            raise StageError(PipelineStage.WRITE) from exc

        logger.info('MIDI exportado: %s (%d bytes)', output_path, len(data))
        return len(data)
