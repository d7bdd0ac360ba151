"""Default API endpoint and bundled dataset location."""

from pathlib import Path

DEFAULT_API_BASE_URL = "http://gfeljm.tianqiapi.com/api"
DEFAULT_API_VERSION = "v9"

DEFAULT_DATASET_PATH = Path(__file__).parent.parent / "data" / "citycode.json"
