"""Tests for SetupSequencer."""

import pytest

from agent_eval.core.errors import AgentEvalError
from agent_eval.evaluation.application.setup import SetupSequencer
from agent_eval.example.domain.instance import ScheduledInstance
from tests.evaluation.fake_observer import FakeEvaluationObserver
from tests.example.fake_examples import make_example, make_instance
from tests.repository.fake_store import FakeInstancePreparer


def _instances(count: int) -> list[ScheduledInstance]:
    return [make_instance(example=make_example(name=f"ex_{i}")) for i in range(count)]


class TestSetupSequencer:
    """Setup runs strictly one instance at a time, in instance order."""

    async def test_setup_is_sequential_and_ordered(self) -> None:
        preparer = FakeInstancePreparer(delay_seconds=0.005)
        sequencer = SetupSequencer(preparer=preparer, observer=FakeEvaluationObserver())

        await sequencer.setup_all(instances=_instances(4))

        assert preparer.setup_order == ["ex_0", "ex_1", "ex_2", "ex_3"]
        assert preparer.max_in_flight == 1

    async def test_first_failure_stops_remaining_setups(self) -> None:
        preparer = FakeInstancePreparer(fail_instances={"ex_1"})
        sequencer = SetupSequencer(preparer=preparer, observer=FakeEvaluationObserver())

        with pytest.raises(AgentEvalError, match="ex_1"):
            await sequencer.setup_all(instances=_instances(3))

        assert preparer.setup_order == ["ex_0"]

    async def test_emits_started_and_completed_per_instance(self) -> None:
        observer = FakeEvaluationObserver()
        sequencer = SetupSequencer(preparer=FakeInstancePreparer(), observer=observer)

        await sequencer.setup_all(instances=_instances(2))

        assert observer.timeline == [
            ("setup_started", "ex_0"),
            ("setup_completed", "ex_0"),
            ("setup_started", "ex_1"),
            ("setup_completed", "ex_1"),
        ]
