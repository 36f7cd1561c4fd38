import argparse
import sys
from typing import Callable, List, Optional

from src.console.api import EmployeeApiClient
from src.console.controller import EmployeeConsole
from src.console.export import ExportError
from src.console.fields import FIELDS, FieldKind, options_for
from src.console.listing import highlight
from src.console.state import AlertKind, division_disabled, total_pages

Ask = Callable[[str], str]

LIST_COLUMNS = ("id", "empId", "name", "designation", "directory", "division", "phone")


def _print_alert(console: EmployeeConsole) -> int:
    alert = console.state.alert
    if alert is None:
        return 0
    print(f"[{alert.kind.value}] {alert.message}")
    console.close_alert()
    return 1 if alert.kind is AlertKind.ERROR else 0


def _marked(value, term: str) -> str:
    return "".join(f"[{part}]" if hit else part for part, hit in highlight(value, term))


def cmd_list(console: EmployeeConsole, args) -> int:
    console.load()
    if _print_alert(console):
        return 1
    if args.search:
        console.search(args.search)
    console.go_to_page(args.page)

    rows = console.page_rows()
    print(" | ".join(LIST_COLUMNS))
    for row in rows:
        print(" | ".join(_marked(row.get(c, ""), console.state.search) for c in LIST_COLUMNS))
    if not rows:
        print("No employees found.")
    print(f"Page {console.state.page} of {total_pages(console.state)}")
    return 0


def _prompt_form(console: EmployeeConsole, ask: Ask) -> None:
    """Walk the field table; an empty answer keeps the current value."""
    for spec in FIELDS:
        if spec.key == "empId" and console.state.edit_target is not None:
            continue
        if spec.key == "division" and division_disabled(console.state):
            continue
        current = console.state.form.get(spec.key, "")
        marker = "*" if spec.required else ""
        if spec.kind is FieldKind.SELECT:
            options = options_for(spec, console.state.directories, console.state.divisions)
            choices = ", ".join(f"{i}) {o}" for i, o in enumerate(options, start=1))
            answer = ask(f"{spec.label}{marker} [{current}] ({choices}): ").strip()
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                answer = options[int(answer) - 1]
        else:
            hint = " (YYYY-MM-DD)" if spec.kind is FieldKind.DATE else ""
            answer = ask(f"{spec.label}{marker}{hint} [{current}]: ").strip()
        if answer:
            console.change(spec.key, answer)


def cmd_add(console: EmployeeConsole, args, ask: Ask = input) -> int:
    console.load()
    if _print_alert(console):
        return 1
    _prompt_form(console, ask)
    console.submit()
    return _print_alert(console)


def cmd_edit(console: EmployeeConsole, args, ask: Ask = input) -> int:
    console.load()
    if _print_alert(console) or not console.edit(args.id):
        _print_alert(console)
        return 1
    _prompt_form(console, ask)
    console.submit()
    return _print_alert(console)


def cmd_delete(console: EmployeeConsole, args, ask: Ask = input) -> int:
    console.request_delete(args.id)
    print(console.state.alert.message)
    if ask("Proceed? [y/N]: ").strip().lower() in ("y", "yes"):
        console.confirm()
    else:
        console.cancel()
        print("Cancelled.")
    return _print_alert(console)


def cmd_export(console: EmployeeConsole, args) -> int:
    console.load()
    if _print_alert(console):
        return 1
    try:
        path = console.export(args.format, args.out)
    except ExportError as e:
        print(f"[error] {e}")
        return 1
    print(f"Report generated: {path}")
    return 0


def cmd_serve(args) -> int:
    import uvicorn

    uvicorn.run("src.backend.app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Employee records console")
    parser.add_argument("--base-url", help="employee store URL (default: CONSOLE_BASE_URL)")
    parser.add_argument("--basic", action="store_true", help="relaxed form validation")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the employee store API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8080)
    serve.add_argument("--reload", action="store_true")

    lst = sub.add_parser("list", help="show employees")
    lst.add_argument("--search", default="")
    lst.add_argument("--page", type=int, default=1)

    sub.add_parser("add", help="create an employee interactively")

    edit = sub.add_parser("edit", help="edit an employee interactively")
    edit.add_argument("id", type=int)

    delete = sub.add_parser("delete", help="delete an employee")
    delete.add_argument("id", type=int)

    exp = sub.add_parser("export", help="export all employees")
    exp.add_argument("format", choices=["xlsx", "pdf"])
    exp.add_argument("--out", default=".")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[EmployeeConsole] = None, ask: Ask = input) -> int:
    args = build_parser().parse_args(argv)
    if args.command == "serve":
        return cmd_serve(args)

    if console is None:
        console = EmployeeConsole(EmployeeApiClient(base_url=args.base_url), strict=not args.basic)

    if args.command == "list":
        return cmd_list(console, args)
    if args.command == "add":
        return cmd_add(console, args, ask)
    if args.command == "edit":
        return cmd_edit(console, args, ask)
    if args.command == "delete":
        return cmd_delete(console, args, ask)
    return cmd_export(console, args)


if __name__ == '__main__':
    sys.exit(main())
