from cuey.resources.crons import CronsResource
from cuey.resources.events import EventsResource

__all__ = ["CronsResource", "EventsResource"]
