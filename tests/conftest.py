"""
Pytest fixtures for Hold Finder tests.
"""
import numpy as np
import tempfile
import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from holdfinder.dataset import HoldDataset
from holdfinder.locator import HoldLocator
from holdfinder.render.surface import WallSurface
from holdfinder.wall.layout import WallLayout
from holdfinder.wall.pixel_mapper import PixelMapper


SURFACE_WIDTH  = 880
SURFACE_HEIGHT = 1200       # 29 rows → 40 px row spacing

MAIN_CSV = """\
Hold #,1345,1346,1347,1348,1349,1350,1351,1352,1353,1354,1355,R-31
Angle,0,45,90,135,180,225,270,315,0,45,90
Hold #,D1,,d3,1400,1401,1402,1403,1404,1405,1406,1407B,R-7
Angle,90,,90,90,90,90,90,90,90,90,180
notes,,,,,,,,,,,,
Hold #,9001,9002,9003,9004,9005,9006,9007,9008,9009,9010,9011,R-99
Angle,1,1,1,1,1,1,1,1,1,1,1
"""

AUX_CSV = """\
1→Hold #,2001,2002,2003,2004,2005,2006,2007,2008,2009,2010,R-34
2→Angle,10,20,30,40,50,60,70,80,90,100
3→Hold #,2101,2102,2103,2104,2105,2106,2107,2108,2109,2110,R-8
4→Angle,,,,,,,,,,
"""


@pytest.fixture
def layout():
    return WallLayout.from_config()


@pytest.fixture
def background():
    """Gradient wall image so that every pixel differs from its neighbours."""
    image = np.zeros((SURFACE_HEIGHT, SURFACE_WIDTH, 3), dtype=np.uint8)
    image[..., 0] = np.linspace(0, 255, SURFACE_WIDTH).astype(np.uint8)[None, :]
    image[..., 1] = np.linspace(0, 255, SURFACE_HEIGHT).astype(np.uint8)[:, None]
    image[..., 2] = 90
    return image


@pytest.fixture
def surface(background):
    return WallSurface(background)


@pytest.fixture
def mapper(layout):
    return PixelMapper(layout, SURFACE_WIDTH, SURFACE_HEIGHT)


@pytest.fixture
def csv_files(tmp_path):
    main_path = tmp_path / "main.csv"
    aux_path  = tmp_path / "aux.csv"
    main_path.write_text(MAIN_CSV, encoding="utf-8")
    aux_path.write_text(AUX_CSV, encoding="utf-8")
    return main_path, aux_path


@pytest.fixture
def dataset(layout, csv_files):
    main_path, aux_path = csv_files
    return HoldDataset.load(layout, main_path, aux_path)


@pytest.fixture
def locator(layout, dataset, surface):
    return HoldLocator(layout, dataset, surface)


@pytest.fixture
def temp_output_dir():
    """Create a temporary output directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
