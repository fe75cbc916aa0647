"""
Interactive terminal front end.

Commands are read on a daemon thread so the event loop keeps serving
responses while the user types. Each command runs as its own task; the view
is printed again whenever one finishes. ``delete`` is the exception: it asks
for confirmation and blocks until answered, like a modal dialog.
"""

import asyncio
import logging
import threading
from typing import Callable, List, Optional, Set

from app.core.controller import ViewController
from app.models.view import ReviewView, SearchView

logger = logging.getLogger(__name__)

PROMPT = "> "
RULE = "-" * 60

SEARCH_HELP = [
    "search <keyword>   search the catalog",
    "page <n>           show another page of results",
    "select <n>         open reviews for result number n",
    "quit               leave",
]
REVIEW_HELP = [
    "write <text>       replace the review draft",
    "submit [text]      submit the draft (or the given text)",
    "delete <id>        delete a review",
    "back               back to the search results",
    "quit               leave",
]

# commands awaited before the next line is read
MODAL_COMMANDS = {"delete"}
QUIT_COMMANDS = {"quit", "exit"}


def confirm_on_terminal(message: str, read_line: Callable[[str], str] = input) -> bool:
    try:
        answer = read_line(f"{message} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def format_view(view: SearchView | ReviewView) -> str:
    lines: List[str] = [RULE, view.heading, RULE]

    if isinstance(view, ReviewView):
        lines.append("[back] Back to Search")
        lines.append(view.title_heading)
        lines.append(f"Draft: {view.draft}" if view.draft else "Draft: (empty)")
        if view.error:
            lines.append(f"! {view.error}")
        if view.empty_message:
            lines.append(view.empty_message)
        for entry in view.reviews:
            lines.append(f"  {entry.text}")
            lines.append(f"  {entry.label}  [delete {entry.review_id}]")
        return "\n".join(lines)

    lines.append(f"Keyword: {view.keyword}" if view.keyword else "Keyword: (none)")
    if view.error:
        lines.append(f"! {view.error}")
    for number, card in enumerate(view.cards, start=1):
        lines.append(f"{number:>3}. {card.heading}")
        lines.append(f"     {card.poster_alt}: {card.poster_url}")
    if view.pagination:
        pages = " ".join(
            f"({c.page})" if c.disabled else f"[{c.page}]"
            for c in view.pagination
        )
        lines.append(f"Pages: {pages}")
    return "\n".join(lines)


class TerminalShell:
    def __init__(
            self,
            controller: ViewController,
            read_line: Callable[[str], str] = input,
            write: Callable[[str], None] = print,
    ):
        self.controller = controller
        self.read_line = read_line
        self.write = write
        self._pending: Set[asyncio.Task] = set()

    def show(self) -> None:
        self.write(format_view(self.controller.view()))

    def help_lines(self) -> List[str]:
        if self.controller.state.in_review_mode:
            return REVIEW_HELP
        return SEARCH_HELP

    async def run(self) -> None:
        self.show()
        try:
            while True:
                try:
                    line = await self._read_command()
                except EOFError:
                    break

                command = line.strip().partition(" ")[0].lower()
                if command in QUIT_COMMANDS:
                    break
                if not command:
                    continue

                if command in MODAL_COMMANDS:
                    await self.execute(line)
                    self.show()
                    continue

                task = asyncio.create_task(self.execute(line))
                self._pending.add(task)
                task.add_done_callback(self._on_done)
        finally:
            for task in self._pending:
                task.cancel()
            if self._pending:
                await asyncio.gather(*self._pending, return_exceptions=True)

    async def _read_command(self) -> str:
        # daemon thread: a pending input() must not hold up exit on Ctrl-C
        loop = asyncio.get_running_loop()
        line: asyncio.Future = loop.create_future()

        def settle(value: Optional[str], exc: Optional[Exception]) -> None:
            if line.done():
                return
            if exc is not None:
                line.set_exception(exc)
            else:
                line.set_result(value)

        def reader() -> None:
            try:
                value = self.read_line(PROMPT)
            except Exception as exc:
                loop.call_soon_threadsafe(settle, None, exc)
            else:
                loop.call_soon_threadsafe(settle, value, None)

        threading.Thread(target=reader, name="terminal-input", daemon=True).start()
        return await line

    def _on_done(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Command failed: %s", exc, exc_info=exc)
            return
        self.show()

    async def execute(self, line: str) -> None:
        command, _, arg = line.strip().partition(" ")
        command = command.lower()
        arg = arg.strip()
        controller = self.controller
        in_review_mode = controller.state.in_review_mode

        if command == "help":
            self.write("\n".join(self.help_lines()))
            return

        if not in_review_mode:
            if command == "search":
                await controller.search(arg, 1)
            elif command == "page":
                page = self._page_number(arg)
                if page is not None:
                    await controller.change_page(page)
            elif command == "select":
                title = self._card_title(arg)
                if title is not None:
                    await controller.select_movie(title)
            else:
                self.write(f"Unknown command: {command} (try 'help')")
            return

        if command == "back":
            controller.back()
        elif command == "write":
            controller.set_draft(arg)
        elif command == "submit":
            await controller.submit_review(arg if arg else None)
        elif command == "delete":
            review_id = self._int_arg(arg)
            if review_id is not None:
                await controller.delete_review(review_id)
        else:
            self.write(f"Unknown command: {command} (try 'help')")

    def _int_arg(self, arg: str) -> Optional[int]:
        try:
            return int(arg)
        except ValueError:
            self.write(f"Expected a number, got {arg!r}")
            return None

    def _search_view(self) -> Optional[SearchView]:
        view = self.controller.view()
        if not isinstance(view, SearchView):
            self.write("Only available on the search results")
            return None
        return view

    def _page_number(self, arg: str) -> Optional[int]:
        page = self._int_arg(arg)
        if page is None:
            return None
        view = self._search_view()
        if view is None:
            return None
        for control in view.pagination:
            if control.page == page:
                # the current page's control is disabled
                return None if control.disabled else page
        self.write(f"No page {page}")
        return None

    def _card_title(self, arg: str) -> Optional[str]:
        number = self._int_arg(arg)
        if number is None:
            return None
        view = self._search_view()
        if view is None:
            return None
        if not 1 <= number <= len(view.cards):
            self.write(f"No result number {number}")
            return None
        return view.cards[number - 1].title
