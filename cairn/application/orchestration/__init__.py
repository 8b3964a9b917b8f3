"""
Checkpoint orchestration for the state store provisioning steps.
"""

from cairn.application.orchestration.checkpoint import (
    CheckpointStep,
    CheckpointWriter,
    StepAction,
    StepPlan,
    StepState,
    CREDENTIALS_STEP,
    CREATE_STEP,
    plan_step,
)

__all__ = [
    "CheckpointStep",
    "CheckpointWriter",
    "StepAction",
    "StepPlan",
    "StepState",
    "CREDENTIALS_STEP",
    "CREATE_STEP",
    "plan_step",
]
