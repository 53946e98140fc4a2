import pytest
from bittensor_wallet import Keypair

from subtensor_fixtures.core.chain import ChainClient
from subtensor_fixtures.core.config import FixtureConfig
from tests.helpers import FakeChainClient, FakeClock


@pytest.fixture
def admin():
    return Keypair.create_from_uri("//Alice")


@pytest.fixture
def coldkey():
    return Keypair.create_from_uri("//Bob")


@pytest.fixture
def hotkey():
    return Keypair.create_from_uri("//Bob//hot")


@pytest.fixture
def fixture_config(admin):
    return FixtureConfig(
        admin=admin,
        retry_delay=0.5,
        poll_interval=12.0,
        wait_timeout=600.0,
        settle_delay=2.0,
    )


@pytest.fixture
def chain(fixture_config):
    return FakeChainClient(config=fixture_config)


@pytest.fixture
def clock(chain):
    return FakeClock(chain=chain)


@pytest.fixture
def mock_substrate(mocker):
    return mocker.AsyncMock()


@pytest.fixture
def client(mock_substrate, fixture_config):
    return ChainClient(
        chain_endpoint="ws://127.0.0.1:9944",
        config=fixture_config,
        substrate=mock_substrate,
    )
