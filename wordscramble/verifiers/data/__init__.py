# Bundled word list shipped with the package

from pathlib import Path

_DATA_DIR = Path(__file__).parent

# Candidate root words, one per line
DEFAULT_START_WORDS_PATH = _DATA_DIR / "start.txt"
