"""Component kind definitions."""

from enum import Enum


class ComponentKind(str, Enum):
    """Kinds of backing components checked at startup."""

    DOCUMENT_STORE = "Document Store"
    OBJECT_STORE = "Object Store"
    CACHE = "Cache"
    COORDINATION_SERVICE = "Coordination Service"
    MESSAGE_BROKER = "Message Broker"
