from .basic import BasicStrategySeat
from .console import ConsoleSeat, parse_action
from .random_seat import RandomSeat
from .scripted import ScriptedSeat

__all__ = ["BasicStrategySeat", "ConsoleSeat", "RandomSeat", "ScriptedSeat", "parse_action"]
