"""Service interfaces for the Docker CLI client."""

# Standard library imports
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

# Local application imports
from ..core.tracing import TransactionId
from ..models import ContainerId, ContainerIp


class DockerApi(ABC):
    """Interface for container lifecycle operations against a docker daemon."""

    @abstractmethod
    async def run(self, image: str, args: Sequence[str] = (), *, transid: TransactionId) -> ContainerId:
        """Spawn a container in detached mode.

        Args:
            image: The image to start the container with
            args: Extra arguments for the docker run command

        Returns:
            Id of the started container
        """
        pass

    @abstractmethod
    async def inspect_ip_address(self, id: ContainerId, network: str, *, transid: TransactionId) -> ContainerIp:
        """Get the IP address of a container.

        A container may be attached to more than one network and has an
        address in each of them, so the network name is required.

        Args:
            id: The container to get the IP address from
            network: Name of the network to get the IP address from

        Returns:
            IP of the container in that network
        """
        pass

    @abstractmethod
    async def pause(self, id: ContainerId, *, transid: TransactionId) -> None:
        """Pause the container with the given id."""
        pass

    @abstractmethod
    async def unpause(self, id: ContainerId, *, transid: TransactionId) -> None:
        """Unpause the container with the given id."""
        pass

    @abstractmethod
    async def rm(self, id: ContainerId, *, transid: TransactionId) -> None:
        """Remove the container with the given id, stopping it if needed."""
        pass

    @abstractmethod
    async def ps(
        self,
        filters: Sequence[Tuple[str, str]] = (),
        all: bool = False,
        *,
        transid: TransactionId,
    ) -> List[ContainerId]:
        """List container ids.

        Args:
            filters: Filters to apply to the ps command, as (attribute, value) pairs
            all: Whether to include stopped containers as well

        Returns:
            Container ids in the order docker reports them
        """
        pass

    @abstractmethod
    async def pull(self, image: str, *, transid: TransactionId) -> None:
        """Pull the given image."""
        pass
