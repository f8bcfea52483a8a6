import asyncio

from langgraph.graph import StateGraph, START, END

from registration.state import RegistrationDraft, TransitionState, WizardStep
from registration.validator import DraftValidator

DEFAULT_TRANSITION_DELAY = 0.3


class WizardGraphFactory:
    """
    Builds the step transition function:

        START -> authorize -> settle -> apply -> END
                     \\-> END   (rejected)
    """

    def __init__(self, validator: DraftValidator, delay: float = DEFAULT_TRANSITION_DELAY):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.validator = validator
        self.delay = delay

    async def settle(self, state: TransitionState) -> dict:
        """
        Simulated processing time. Drives the loading indicator, nothing else.
        """
        await asyncio.sleep(self.delay)
        return {"busy": True}

    @staticmethod
    def apply(state: TransitionState) -> dict:
        update = {"current": state.target, "busy": False}
        if state.current is WizardStep.COMPLETE and state.target is WizardStep.LANDING:
            update["draft"] = RegistrationDraft()
            update["draft_reset"] = True
        return update

    def build(self) -> StateGraph:
        g = StateGraph(TransitionState)

        g.add_node("authorize", self.validator.authorize)
        g.add_node("settle", self.settle)
        g.add_node("apply", self.apply)

        g.add_edge(START, "authorize")

        g.add_conditional_edges(
            "authorize",
            self.validator.should_proceed,
            {"reject": END, "proceed": "settle"},
        )
        g.add_edge("settle", "apply")
        g.add_edge("apply", END)

        return g

    def compile(self):
        return self.build().compile()
