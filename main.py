import argparse
import logging

from config.log import setup_logging
from config.settings import AppSettings
from persistence.factory import build_checkpointer
from signup.fields import DISPLAY_ORDER, FIELDS, FORM_TITLE, SUCCESS_MESSAGE, TIP
from signup.graph import SignupGraphFactory
from signup.state import FormEvent
from signup.validator import SignupValidator

logger = logging.getLogger(__name__)


DEMO_EVENTS = [
    FormEvent.change("first_name", "Khushi"),
    FormEvent.blur("first_name"),
    FormEvent.blur("last_name"),
    FormEvent.change("email", "khushi@gmail"),
    FormEvent.blur("email"),
    FormEvent.change("email", "khushi@gmail.com"),
    FormEvent.submit(),
    FormEvent.change("last_name", "Kaushik"),
    FormEvent.change("dob", "2004-01-01"),
    FormEvent.change("country", "India"),
    FormEvent.change("phone", "9999999999"),
    FormEvent.change("password", "secret1"),
    FormEvent.change("confirm_password", "secret1"),
    FormEvent.submit(),
]


def send(graph, config, event: FormEvent) -> dict:
    graph.invoke({"event": event.model_dump()}, config)
    return graph.get_state(config).values


def print_errors(values: dict) -> None:
    for name, msg in values.get("errors", {}).items():
        print(f"  {FIELDS[name].label}: {msg}")


def run_demo(graph, config) -> None:
    for i, event in enumerate(DEMO_EVENTS, 1):
        values = send(graph, config, event)
        target = f" {event.name}" if event.name else ""
        print(f"\nEVENT #{i}: {event.type}{target}")
        print_errors(values)
        if values.get("submitted"):
            print(SUCCESS_MESSAGE)

    hist = list(graph.get_state_history(config))
    thread_id = config["configurable"]["thread_id"]
    print(f"\nCheckpoint count for thread_id={thread_id}: {len(hist)}")


def prompt(name: str) -> str:
    spec = FIELDS[name]
    hint = f" ({spec.placeholder})" if spec.placeholder else ""
    return input(f"{spec.label}{hint}: ")


def run_interactive(graph, config) -> None:
    print(FORM_TITLE)
    pending = list(DISPLAY_ORDER)

    while True:
        for name in pending:
            values = send(graph, config, FormEvent.change(name, prompt(name)))
            values = send(graph, config, FormEvent.blur(name))
            if name in values["errors"]:
                print(f"  {values['errors'][name]}")

        values = send(graph, config, FormEvent.submit())
        if values.get("submitted"):
            print(SUCCESS_MESSAGE)
            break

        print("\nPlease fix the following:")
        print_errors(values)
        pending = [name for name in DISPLAY_ORDER if name in values["errors"]]

    print()
    print(TIP)


def main():
    parser = argparse.ArgumentParser(description="Signup form with inline validation")
    parser.add_argument("-i", "--interactive", action="store_true", help="fill the form in the terminal")
    args = parser.parse_args()

    settings = AppSettings.from_env()
    setup_logging(settings.log_level)

    graph = SignupGraphFactory(SignupValidator()).compile(
        checkpointer=build_checkpointer(settings)
    )
    config = settings.run_config()

    if args.interactive:
        run_interactive(graph, config)
    else:
        run_demo(graph, config)


if __name__ == "__main__":
    main()
