"""Execution and tally phases."""
from .execution import ExecutionPhase, run_execution_phase
from .tally import TallyPhase, decode_reveal, reduce_reveals, run_tally_phase

__all__ = [
    "ExecutionPhase",
    "TallyPhase",
    "decode_reveal",
    "reduce_reveals",
    "run_execution_phase",
    "run_tally_phase",
]
