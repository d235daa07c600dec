"""Two-phase build step contract."""
from abc import ABC, abstractmethod

from core.application.state import BuildState
from core.domain.enums.step_action import StepAction


class Step(ABC):
    """
    A unit of a build run with a forward action and its reversal.

    The orchestrator calls ``compensate`` for every step whose ``execute`` was
    entered, after the run ends, whether it halted or not. ``compensate`` must
    never raise: a failed cleanup is reported to the user and the remaining
    cleanups still run.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    async def execute(self, state: BuildState) -> StepAction:
        """
        Perform the step.

        Args:
            state: Shared build state

        Returns:
            CONTINUE to run the next step, HALT to stop the run
        """

    @abstractmethod
    async def compensate(self, state: BuildState) -> None:
        """
        Undo whatever ``execute`` left behind.

        Args:
            state: Shared build state
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
