from .airport_code import AirportCode as AirportCode
from .flight_id import FlightId as FlightId
