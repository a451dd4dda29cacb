# __main__.py
"""
Entry point for `python -m wavgen`.

Flow:
  cli.main -> RenderRequest -> render -> write_output
"""

import sys

from wavgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
