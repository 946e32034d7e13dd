from __future__ import annotations

from statusboard.api.server import main

if __name__ == "__main__":
    main()
