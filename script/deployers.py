import boa

from script.sequencer import ContractHandle, DeploymentResult, DeploymentSequencer


class BoaDeployer:
    """Deploys compiled Vyper artifacts on the active boa environment."""

    def deploy(self, artifact, *args):
        return artifact.deploy(*args)

    def __repr__(self) -> str:
        return f"BoaDeployer(eoa={boa.env.eoa})"


def deploy_token_market(
    token: ContractHandle, market: ContractHandle, verify_minter: bool = True
) -> DeploymentResult:
    sequencer = DeploymentSequencer(token, market, verify_minter=verify_minter)
    return sequencer.run(BoaDeployer())
