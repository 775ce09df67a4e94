from __future__ import annotations

#!/usr/bin/env python3
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

"""
Interactive local walkthrough of the advisor flow (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Drives one FlowController through the bundled (or CATALOG_PATH) catalog
- Type the number of an option to choose it
- Prints the reply for each choice and the live price after each step
"""

from fotobox_advisor.application.exceptions import FlowError
from fotobox_advisor.application.use_cases.flow_controller import FlowController
from fotobox_advisor.application.utils.quote_text import render_quote_text, render_selection_summary
from fotobox_advisor.domain.entities.step_descriptor import StepDescriptor
from fotobox_advisor.wiring.dependencies import get_catalog, get_pricing_engine


def _print_header() -> None:
    print("\nLocal Advisor Walkthrough")
    print("-" * 60)
    print("Type an option number and press Enter.")
    print("Commands: /next, /back, /quote, /restart, /quit, /help")
    print("-" * 60)


def _print_step(step: StepDescriptor) -> None:
    if step.reply:
        print(f"\n(assistant) {step.reply}")
    label = f"[{step.position}/{step.total}] " if step.position else ""
    print(f"\n{label}{step.title}")
    if step.description:
        print(step.description)
    for section in step.sections:
        print(f"  {section.title}")
        for item in section.items:
            print(f"    - {item}")
    if step.substep:
        print(f"  ({step.substep.index + 1}/{step.substep.total}) {step.substep.prompt}")
    for i, option in enumerate(step.options, 1):
        marker = "*" if option.selected else " "
        print(f"  {i}.{marker} {option.label}")
    if step.multi and not step.substep:
        print("  (toggle options, then /next)")


def _print_quote(controller: FlowController) -> None:
    quote = get_pricing_engine().price(controller.selection, controller.catalog)
    summary = render_selection_summary(controller.selection, controller.catalog)
    if summary:
        print("\n--- Auswahl ---")
        print(summary)
    print("\n--- Preis ---")
    print(render_quote_text(quote))


def main() -> None:
    controller = FlowController(get_catalog())
    _print_header()
    step = controller.current_step()
    _print_step(step)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd = user_text.lower()
        try:
            if cmd in ("/quit", "/exit"):
                print("Bye!")
                return
            if cmd == "/help":
                print("Commands:")
                print("  <n>      -> choose option n of the current step")
                print("  /next    -> move on (multi-select steps)")
                print("  /back    -> previous step")
                print("  /quote   -> show the live price")
                print("  /restart -> clear all answers")
                print("  /quit    -> exit")
                continue
            if cmd == "/next":
                step = controller.advance()
            elif cmd == "/back":
                step = controller.back()
            elif cmd == "/restart":
                step = controller.reset()
            elif cmd == "/quote":
                _print_quote(controller)
                continue
            elif cmd.isdigit() and 1 <= int(cmd) <= len(step.options):
                step = controller.choose(step.id, step.options[int(cmd) - 1].value)
            else:
                print("Unknown input, try /help.")
                continue
        except FlowError as e:
            print(f"ERROR: {e}")
            continue

        _print_step(step)
        if step.is_complete or step.kind.value == "summary":
            _print_quote(controller)


if __name__ == "__main__":
    main()
