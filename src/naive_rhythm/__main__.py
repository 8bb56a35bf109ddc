import sys

from naive_rhythm.cli import main

sys.exit(main())
