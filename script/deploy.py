from moccasin.boa_tools import VyperContract
from src import market, mercury

from script.deployers import deploy_token_market
from script.sequencer import ContractHandle, DeploymentResult

# Extra isMinter read after addMinter. False sends the grant without checking it
VERIFY_MINTER = True


def deploy() -> DeploymentResult:
    # Market takes the token address as its only constructor argument
    return deploy_token_market(
        ContractHandle("Mercury", mercury),
        ContractHandle("Market", market),
        verify_minter=VERIFY_MINTER,
    )


def moccasin_main() -> VyperContract:
    return deploy().market
