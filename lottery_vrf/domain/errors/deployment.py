"""Deployment registry errors."""

from lottery_vrf.domain.exceptions import LotteryVRFError


class DeploymentError(LotteryVRFError):
    """Base class for deployment errors."""

    pass


class DeploymentNotFoundError(DeploymentError):
    """Raised when looking up a deployment name that was never recorded."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No deployment named {name!r}")
