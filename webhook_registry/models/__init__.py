from .target import Target
from .subscriber import Subscriber
from .target_subscriber import target_subscriber

__all__ = ["Target", "Subscriber", "target_subscriber"]
