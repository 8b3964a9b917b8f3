"""Tests for the checkpoint state machine and ordered commits."""

from unittest.mock import MagicMock, call

import pytest

from cairn.application.orchestration.checkpoint import (
    CREATE_STEP,
    CREDENTIALS_STEP,
    CheckpointWriter,
    StepAction,
    StepState,
    plan_step,
)
from cairn.domain.entities.cluster_record import (
    STATE_STORE_CREDENTIALS,
    STATE_STORE_CREDS_CHECK,
    STATE_STORE_DETAILS,
)
from cairn.domain.errors import PersistenceError

from conftest import make_record


class TestPlanStep:
    def test_done_is_skipped(self):
        plan = plan_step(StepState.DONE)
        assert plan.action == StepAction.SKIP
        assert plan.next_state == StepState.DONE
        assert not plan.should_run

    def test_done_is_skipped_even_when_not_applicable(self):
        assert plan_step(StepState.DONE, applicable=False).action == StepAction.SKIP

    def test_not_done_runs(self):
        plan = plan_step(StepState.NOT_DONE)
        assert plan.should_run
        assert plan.next_state == StepState.DONE

    def test_not_applicable_stays_not_done(self):
        plan = plan_step(StepState.NOT_DONE, applicable=False)
        assert plan.action == StepAction.NOT_APPLICABLE
        assert plan.next_state == StepState.NOT_DONE

    def test_deterministic(self):
        assert plan_step(StepState.NOT_DONE) == plan_step(StepState.NOT_DONE)


class TestCheckpointStep:
    def test_credentials_step_state(self):
        assert CREDENTIALS_STEP.state_of(make_record()) == StepState.NOT_DONE
        done = make_record(state_store_creds_check=True)
        assert CREDENTIALS_STEP.state_of(done) == StepState.DONE

    def test_create_step_reads_its_own_flag(self):
        record = make_record(state_store_creds_check=True)
        assert CREATE_STEP.state_of(record) == StepState.NOT_DONE


class TestCheckpointWriter:
    def test_checkpoint_written_last(self):
        store = MagicMock()
        CheckpointWriter(store).commit(
            "demo",
            CREDENTIALS_STEP,
            [(STATE_STORE_DETAILS, "d"), (STATE_STORE_CREDENTIALS, "c")],
        )
        assert store.update_cluster.call_args_list == [
            call("demo", STATE_STORE_DETAILS, "d"),
            call("demo", STATE_STORE_CREDENTIALS, "c"),
            call("demo", STATE_STORE_CREDS_CHECK, True),
        ]

    def test_failed_data_write_leaves_checkpoint_unwritten(self):
        store = MagicMock()
        store.update_cluster.side_effect = [None, PersistenceError("demo", "x")]
        with pytest.raises(PersistenceError):
            CheckpointWriter(store).commit(
                "demo",
                CREDENTIALS_STEP,
                [(STATE_STORE_DETAILS, "d"), (STATE_STORE_CREDENTIALS, "c")],
            )
        written = [c.args[1] for c in store.update_cluster.call_args_list]
        assert STATE_STORE_CREDS_CHECK not in written
