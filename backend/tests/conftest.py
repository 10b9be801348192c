import os
import sys
from pathlib import Path


BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

# Keep tests deterministic and local-only.
os.environ["IMAGESTORE_SKIP_DOTENV"] = "1"
os.environ["IMAGESTORE_IMAGES_DIR"] = str(BACKEND_ROOT / "test_images")
os.environ["IMAGESTORE_FETCH_TIMEOUT_SECONDS"] = "5"
os.environ["IMAGESTORE_INFER_EXTENSION"] = "0"
os.environ.pop("IMAGESTORE_RESOURCE_PREFIX", None)
