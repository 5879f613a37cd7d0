from __future__ import annotations

import os

os.environ.setdefault("CODE_EDITOR_DISABLE_CONSOLE", "1")
