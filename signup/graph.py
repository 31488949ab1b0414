from typing import Any, Literal
from langgraph.graph import StateGraph, START, END

from signup.state import SignupState
from signup.validator import SignupValidator


class SignupGraphFactory:
    def __init__(self, validator: SignupValidator):
        self.validator = validator

    @staticmethod
    def collect_node(state: SignupState) -> SignupState:
        """
        No-op: graph.invoke({"event": ...}, config) already merges the event
        into the checkpointed form state.
        """
        return state

    @staticmethod
    def route_event(state: SignupState) -> Literal["change", "blur", "submit", "end"]:
        event = state.form_event
        if event is None:
            return "end"
        return event.type

    def build(self) -> StateGraph:
        g = StateGraph(SignupState)

        g.add_node("collect", self.collect_node)
        g.add_node("change", self.validator.handle_change)
        g.add_node("blur", self.validator.handle_blur)
        g.add_node("submit", self.validator.handle_submit)
        g.add_node("complete", self.validator.complete)

        g.add_edge(START, "collect")
        g.add_conditional_edges(
            "collect",
            self.route_event,
            {"change": "change", "blur": "blur", "submit": "submit", "end": END},
        )
        g.add_edge("change", END)
        g.add_edge("blur", END)

        g.add_conditional_edges(
            "submit",
            self.validator.should_complete,
            {"end": END, "complete": "complete"},
        )
        g.add_edge("complete", END)

        return g

    def compile(self, checkpointer: Any):
        return self.build().compile(checkpointer=checkpointer)
