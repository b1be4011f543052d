# Copyright 2025 Michael Homer. See LICENSE for details.
import sys

from .cli import main


sys.exit(main())
