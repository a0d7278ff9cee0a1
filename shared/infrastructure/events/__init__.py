# In-process events
from .event_bus import EventBus, event_bus

__all__ = ['EventBus', 'event_bus']
