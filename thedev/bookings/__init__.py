from .ledger import BookingLedger


__all__ = ["BookingLedger"]
