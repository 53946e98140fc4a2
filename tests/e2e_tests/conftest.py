import os

import pytest
from bittensor_wallet import Keypair

from subtensor_fixtures import ChainClient, FixtureConfig

CHAIN_ENDPOINT = os.getenv("SF_CHAIN_ENDPOINT")


@pytest.fixture
def fixture_config():
    return FixtureConfig(admin=Keypair.create_from_uri("//Alice"), poll_interval=1.0)


@pytest.fixture
def client(fixture_config):
    """A client for the local node at `SF_CHAIN_ENDPOINT`. Tests using it are skipped when the variable is unset."""
    if not CHAIN_ENDPOINT:
        pytest.skip("SF_CHAIN_ENDPOINT is not set.")
    return ChainClient(CHAIN_ENDPOINT, config=fixture_config)


@pytest.fixture
def bob():
    return Keypair.create_from_uri("//Bob")


@pytest.fixture
def bob_hotkey():
    return Keypair.create_from_uri("//Bob//hot")


@pytest.fixture
def charlie_hotkey():
    return Keypair.create_from_uri("//Charlie//hot")
