import pytest

from pggeom.core.config import RawConfig
from pggeom.core.config import read_config
from pggeom.testing.cli import PggeomCliRunner


@pytest.fixture()
def rc(tmp_path) -> RawConfig:
    rc = read_config(envfile=tmp_path / '.env', environ={})
    rc.add('pytest', {
        'srid': 0,
    })
    rc.lock()
    return rc


@pytest.fixture()
def cli() -> PggeomCliRunner:
    return PggeomCliRunner()
