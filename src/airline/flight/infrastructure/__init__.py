from .in_memory_flight_catalog import InMemoryFlightCatalog as InMemoryFlightCatalog
from .in_memory_flight_catalog import SEED_FLIGHTS as SEED_FLIGHTS
