"""Container-related type definitions."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ContainerAddress(BaseModel):
    """Name and IP addresses of a compose container.

    Attributes:
        container_id: Container ID as reported by ``ps -q``.
        name: Container name without the leading slash docker reports.
        ip_address: Default bridge IP address, or the first network address when
            the container is only attached to user-defined networks.
        networks: Network name -> IP address for every attached network.
    """

    model_config = ConfigDict(frozen=True)

    container_id: str = Field(description="Container ID")
    name: str = Field(description="Container name")
    ip_address: str = Field(default="", description="Primary IP address of the container")
    networks: dict[str, str] = Field(default_factory=dict, description="Network name -> IP address")

    def to_line(self) -> str:
        """Render as a ``<name>\\t<ip>`` line."""
        return f"{self.name}\t{self.ip_address}"


__all__ = [
    "ContainerAddress",
]
