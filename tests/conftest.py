from pathlib import Path

import boa
import pytest

from script.sequencer import ContractHandle, DeploymentSequencer
from tests.fakes import FakeChain

SRC = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def boa_anchor():
    """Roll the boa environment back after every test"""
    with boa.env.anchor():
        yield


@pytest.fixture
def account():
    """A funded account to deploy from"""
    acct = boa.env.generate_address()
    boa.env.set_balance(acct, 10**18)  # 1 ETH initial funding
    return acct


@pytest.fixture(scope="session")
def mercury_artifact():
    return boa.load_partial(str(SRC / "mercury.vy"))


@pytest.fixture(scope="session")
def game_item_artifact():
    return boa.load_partial(str(SRC / "game_item.vy"))


@pytest.fixture(scope="session")
def market_artifact():
    return boa.load_partial(str(SRC / "market.vy"))


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def sequencer():
    """Sequencer over plain string artifacts, for use with FakeChain"""
    return DeploymentSequencer(
        token=ContractHandle("Mercury", "Mercury"),
        market=ContractHandle("Market", "Market"),
    )
