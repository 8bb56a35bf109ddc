from typing import Final

# Cabeçalho do formato de texto
MAGIC: Final[str] = 'naive-rhythm'
BPM_KEYWORD: Final[str] = 'bpm'

# Limite de um inteiro sem sinal de 32 bits (tempo e marcações)
U32_MAX: Final[int] = 0xFFFFFFFF

MS_PER_MINUTE: Final[int] = 60_000
US_PER_MINUTE: Final[int] = 60_000_000

# Faixa de BPM em que o período da batida é de pelo menos 1 ms
MIN_TEMPO: Final[int] = 1
MAX_TEMPO: Final[int] = MS_PER_MINUTE

# Parâmetros fixos do arquivo MIDI
TICKS_PER_BEAT: Final[int] = 480
MIDI_FILE_TYPE: Final[int] = 1  # faixas paralelas
NOTE_PITCH: Final[int] = 60
VELOCITY_ON: Final[int] = 127
VELOCITY_OFF: Final[int] = 0
CHANNEL: Final[int] = 0

# Compasso 4/4, 24 clocks por clique, 8 fusas por semínima
TIME_SIGNATURE_NUMERATOR: Final[int] = 4
TIME_SIGNATURE_DENOMINATOR: Final[int] = 4
CLOCKS_PER_CLICK: Final[int] = 24
NOTATED_32ND_NOTES_PER_BEAT: Final[int] = 8

# 480 ticks * 240; converte um intervalo de batidas no tempo dado em ticks
TICK_SCALE: Final[int] = 115_200

# Maiores valores representáveis no arquivo MIDI
MAX_DELTA_TICKS: Final[int] = 0x0FFFFFFF
MAX_MIDI_TEMPO: Final[int] = 0xFFFFFF
