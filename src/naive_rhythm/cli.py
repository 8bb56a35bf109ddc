import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from naive_rhythm import __version__
from naive_rhythm.application.controller import RhythmController
from naive_rhythm.domain.errors import StageError

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='naive-rhythm',
        description='Quantiza marcações de teclas e exporta o ritmo como MIDI.',
    )
    parser.add_argument('-i', '--input', type=Path, required=True)
    parser.add_argument('-o', '--output', type=Path, required=True)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-V', '--version', action='version', version=__version__)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    controller = RhythmController()
    try:
        controller.convert_file(args.input, args.output)
    except StageError as exc:
        logger.debug('Erro ao converter %s', args.input, exc_info=True)
        print(f'naive-rhythm: {exc}: {exc.__cause__}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
