from .in_memory_booking_ledger import InMemoryBookingLedger as InMemoryBookingLedger
