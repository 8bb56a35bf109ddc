"""Converte marcações de teclas em um ritmo quantizado salvo como MIDI."""

__version__ = '0.1.0'
