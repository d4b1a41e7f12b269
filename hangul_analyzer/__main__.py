import sys

from hangul_analyzer.app.cli import main

sys.exit(main())
