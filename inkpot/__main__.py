#!/usr/bin/env python3
"""
The inkpot cli runner
"""
# Imports:
from __future__ import annotations

import logging as logmod
import sys

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main() -> None:
    from inkpot.control.main import InkpotMain  # noqa: PLC0415
    sys.exit(InkpotMain().main(sys.argv[1:]))

if __name__ == "__main__":
    main()
