"""Messaging infrastructure - Event Bus for domain events."""

from .event_bus import EventBus, EventHandler

__all__ = ["EventBus", "EventHandler"]
