from pathlib import Path

SCRIPT_DIR = Path(__file__).parent
DATA_DIR = SCRIPT_DIR / "data"
BUNDLED_TESTNET_REGISTRY = DATA_DIR / "testnet.json"
