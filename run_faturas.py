#!/usr/bin/env python3
"""Ponto de entrada para o menu de faturas sem instalação do pacote."""
from __future__ import annotations

import sys
from pathlib import Path


def _ensure_src_on_path() -> None:
    repo_root = Path(__file__).resolve().parent
    src_path = repo_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


def main() -> int:
    _ensure_src_on_path()
    from faturas.commands.menu import main as menu_main

    return menu_main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
