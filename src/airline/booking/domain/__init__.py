from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .policy import FailureDecision as FailureDecision
from .policy import FailurePolicy as FailurePolicy
from .policy import TransitionContext as TransitionContext
from .policy import TransitionTable as TransitionTable
from .repository import BookingLedger as BookingLedger
from .value_object import BookingId as BookingId
