from .failure_policy import AlwaysFailPolicy as AlwaysFailPolicy
from .failure_policy import FailureDecision as FailureDecision
from .failure_policy import FailurePolicy as FailurePolicy
from .failure_policy import NeverFailPolicy as NeverFailPolicy
from .failure_policy import RandomFailurePolicy as RandomFailurePolicy
from .failure_policy import TransitionContext as TransitionContext
from .transition_table import LEGACY_TRANSITIONS as LEGACY_TRANSITIONS
from .transition_table import STRICT_TRANSITIONS as STRICT_TRANSITIONS
from .transition_table import TransitionTable as TransitionTable
