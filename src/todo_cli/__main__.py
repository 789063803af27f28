# src/todo_cli/__main__.py

from __future__ import annotations

import sys

from .cli.main import main

sys.exit(main())
