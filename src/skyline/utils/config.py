import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Project Root (calculated relative to this file)
    ROOT_DIR: Path = Path(__file__).resolve().parents[3]

    # Search Settings
    DEFAULT_STRATEGY: str = os.getenv("SKYLINE_STRATEGY", "backtrack")
    LOG_LEVEL: str = os.getenv("SKYLINE_LOG_LEVEL", "WARNING").upper()

    # Storage Paths
    PUZZLE_DIR: Path = ROOT_DIR / os.getenv("SKYLINE_PUZZLE_PATH", "data/puzzles")

settings = Settings()
