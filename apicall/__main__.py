from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

from apicall.cli import main

if __name__ == "__main__":
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)
    raise SystemExit(main())
