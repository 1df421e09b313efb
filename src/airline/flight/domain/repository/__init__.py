from .flight_catalog import FlightCatalog as FlightCatalog
