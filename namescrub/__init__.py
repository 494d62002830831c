"""
namescrub — strip control characters from file and directory names
-------------------------------------------------------------------

Modules:
  sanitize.py       : control-character detection and removal
  walker.py         : post-order tree walk applying or reporting renames
  cli.py            : argparse entry point (`namescrub`)
  core/logging.py   : Rich/ANSI logging setup
  core/errors.py    : error hierarchy
  core/fs.py        : permission checks, listing and rename primitives
  core/context.py   : run configuration and walker context
"""

__version__ = "1.0.0"
