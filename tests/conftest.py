import shutil
import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def dataset_file(tmp_path):
    """Writable copy of tests/data/family.json."""
    from secret_santa.utils import tests_data_path

    target = tmp_path / "family.json"
    shutil.copyfile(tests_data_path("family.json"), target)
    return target
