from .controller import SessionController
from .persistence import InMemoryPersistenceGateway, PersistenceGateway

__all__ = ["SessionController", "PersistenceGateway", "InMemoryPersistenceGateway"]
