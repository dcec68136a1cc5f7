"""
Deploys a token, deploys a market bound to it, and makes the market a minter.

The sequence is linear: each step finishes before the next one starts, and
whatever the deployer or the contracts raise is left to propagate. A failure
after the token deployment leaves that token on chain without a market.
"""
from dataclasses import dataclass
from typing import Any, Protocol


class DeploymentError(Exception):
    """Raised when a deployment step returns something unusable."""


class Deployer(Protocol):
    def deploy(self, artifact: Any, *args: Any) -> Any: ...


@dataclass(frozen=True)
class ContractHandle:
    name: str
    artifact: Any


@dataclass(frozen=True)
class DeploymentResult:
    token: Any
    market: Any
    grant: Any = None


class DeploymentSequencer:
    def __init__(self, token: ContractHandle, market: ContractHandle, verify_minter: bool = False):
        self.token = token
        self.market = market
        self.verify_minter = verify_minter

    def run(self, deployer: Deployer) -> DeploymentResult:
        print(f"deployer: {deployer!r}")

        token = self._deploy(deployer, self.token)
        market = self._deploy(deployer, self.market, token.address)
        if market.address == token.address:
            raise DeploymentError(
                f"{self.market.name} and {self.token.name} share address {token.address}"
            )

        grant = token.addMinter(market.address)
        print(f"{self.market.name} granted minter on {self.token.name}")

        if self.verify_minter and not token.isMinter(market.address):
            raise DeploymentError(
                f"{self.market.name} at {market.address} is not a minter on {self.token.name}"
            )

        return DeploymentResult(token=token, market=market, grant=grant)

    def _deploy(self, deployer: Deployer, handle: ContractHandle, *args: Any) -> Any:
        instance = deployer.deploy(handle.artifact, *args)
        address = getattr(instance, "address", None)
        if not address:
            raise DeploymentError(f"{handle.name} deployment returned no address")
        print(f"{handle.name} deployed at: {address}")
        return instance
