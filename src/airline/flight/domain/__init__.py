from .entity import Flight as Flight
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightCatalog as FlightCatalog
from .value_object import AirportCode as AirportCode
from .value_object import FlightId as FlightId
