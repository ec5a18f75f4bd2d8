"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/store layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the store, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class GameModel:
    """Transport-safe snapshot of a tic-tac-toe game used between API, Service, Store, and Game layers."""

    id: UUID
    board: str
    status: str
