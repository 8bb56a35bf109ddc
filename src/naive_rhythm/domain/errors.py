from enum import StrEnum


class RhythmError(Exception):
    """Classe base para todos os erros do conversor."""


class ParseError(RhythmError):
    """Falha ao interpretar o texto de entrada."""

    message: str = 'parse error'

    def __init__(self, token: str | None = None) -> None:
        self.token: str | None = token
        detail = self.message if token is None else f'{self.message}: {token!r}'
        super().__init__(detail)


class BadMagicError(ParseError):
    """Primeiro token ausente ou diferente de `naive-rhythm`."""

    message = 'bad magic'


class BadBpmError(ParseError):
    """Palavra-chave `bpm` ausente ou tempo inválido."""

    message = 'bad bpm'


class BadKeyError(ParseError):
    """Marcação de tecla que não é um inteiro sem sinal de 32 bits."""

    message = 'bad key time'

    def __init__(self, token: str, index: int) -> None:
        self.index: int = index
        super().__init__(token)


class TempoOutOfRangeError(RhythmError, ValueError):
    """Tempo fora da faixa suportada."""

    def __init__(self, tempo: int, minimum: int, maximum: int) -> None:
        self.tempo: int = tempo
        super().__init__(f'tempo {tempo} outside {minimum}..={maximum}')


class OutputError(RhythmError):
    """Falha ao serializar o buffer MIDI."""

    def __init__(self, reason: str = 'buffer error') -> None:
        super().__init__(reason)


class PipelineStage(StrEnum):
    """Etapas do pipeline, usadas nas mensagens de diagnóstico."""

    READ = 'read the input file'
    PARSE = 'parse the input'
    QUANTIZE = 'quantize the input'
    BUILD = 'build the output'
    WRITE = 'write the output file'


class StageError(RhythmError):
    """Erro de uma etapa do pipeline, com a causa encadeada."""

    def __init__(self, stage: PipelineStage) -> None:
        self.stage: PipelineStage = stage
        super().__init__(f'failed to {stage}')
