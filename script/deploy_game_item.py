from moccasin.boa_tools import VyperContract
from src import game_item, market

from script.deployers import deploy_token_market
from script.sequencer import ContractHandle, DeploymentResult

# Extra isMinter read after addMinter. False sends the grant without checking it
VERIFY_MINTER = True


def deploy_game_item() -> DeploymentResult:
    return deploy_token_market(
        ContractHandle("GameItem", game_item),
        ContractHandle("Market", market),
        verify_minter=VERIFY_MINTER,
    )


def moccasin_main() -> VyperContract:
    return deploy_game_item().market
