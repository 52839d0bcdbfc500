from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from twistcore.explorer import explore_scrambles  # noqa: E402


def main() -> None:
    print(explore_scrambles(64, 20, seed=0))
    print(explore_scrambles(64, 28, seed=1))


if __name__ == "__main__":
    main()
