from .booking_ledger import BookingLedger as BookingLedger
