"""Interactive text menus for the photo catalog."""

from __future__ import annotations

from loguru import logger

from app.viewmodels.catalog_vm import CatalogVM
from app.views import prompts
from app.views.constants import (
    CONTINUE_PROMPT,
    GOODBYE_TEXT,
    INVALID_CHOICE,
    MAIN_MENU,
    MAIN_PROMPT,
    QUERY_MENU,
    QUERY_PROMPT,
    RECORD_SEPARATOR,
    SECTION_LINE,
    WELCOME_TEXT,
)
from app.views.prompts import InputFn, OutputFn
from core.validation import MAX_RATING, MIN_RATING


class ConsoleMenu:
    """Main menu loop and query sub-menu driving a `CatalogVM`.

    End of input at any prompt ends the session.
    """

    def __init__(
        self,
        vm: CatalogVM,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ) -> None:
        self._vm = vm
        self._in = input_fn
        self._out = output_fn

    def run(self) -> int:
        """Run until the user exits; return the process exit code."""
        self._out(WELCOME_TEXT)
        actions = {
            "1": self.view_catalog,
            "2": self.add_photo,
            "3": self.delete_photo,
            "4": self.query_menu,
        }
        try:
            while True:
                self._print_lines(MAIN_MENU)
                choice = self._in(f"{MAIN_PROMPT}: ").strip()
                if choice == "0":
                    self._out("Shutting down...")
                    break
                action = actions.get(choice)
                if action is None:
                    self._out(INVALID_CHOICE)
                else:
                    action()
                self._in(f"\n{CONTINUE_PROMPT}")
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, leaving menu")
            self._out("")
        self._out(GOODBYE_TEXT)
        return 0

    def view_catalog(self) -> None:
        """Print every photo in the catalog."""
        self._out("======= Photo Catalog =======")
        self._print_lines(self._vm.catalog_lines())
        self._out(SECTION_LINE)

    def add_photo(self) -> None:
        """Collect fields for a new photo and add it."""
        self._out("======= Add a New Photo =======")
        file_name = prompts.read_string(
            "Enter the file name", input_fn=self._in, output_fn=self._out
        )
        description = prompts.read_string(
            "Enter a description (may be empty)",
            allow_empty=True,
            input_fn=self._in,
            output_fn=self._out,
        )
        date_taken = prompts.read_datetime(
            "Enter the date and time taken", input_fn=self._in, output_fn=self._out
        )
        size = prompts.read_float(
            "Enter the file size (MB)", min_value=0.0, input_fn=self._in, output_fn=self._out
        )
        rating = prompts.read_int(
            f"Enter the rating ({MIN_RATING}-{MAX_RATING})",
            min_value=MIN_RATING,
            max_value=MAX_RATING,
            input_fn=self._in,
            output_fn=self._out,
        )
        self._out(self._vm.add_photo(file_name, description, date_taken, size, rating))
        self._out(SECTION_LINE)

    def delete_photo(self) -> None:
        """Ask for an id and delete that photo."""
        self._out("======= Delete a Photo =======")
        record_id = prompts.read_int(
            "Enter the ID of the photo to delete", input_fn=self._in, output_fn=self._out
        )
        self._out(self._vm.delete_photo(record_id))
        self._out(SECTION_LINE)

    def query_menu(self) -> None:
        """Run the query sub-menu until the user goes back."""
        queries = {
            "1": self.query_by_rating,
            "2": self.query_by_date,
            "3": self.query_total_count,
            "4": self.query_largest,
        }
        while True:
            self._print_lines(QUERY_MENU)
            choice = self._in(f"{QUERY_PROMPT}: ").strip()
            if choice == "0":
                return
            query = queries.get(choice)
            if query is None:
                self._out(INVALID_CHOICE)
            else:
                query()
            self._in(f"\n{CONTINUE_PROMPT}")

    def query_by_rating(self) -> None:
        """Show photos rated at or above a chosen minimum."""
        self._out("\n--- Query: photos by rating ---")
        min_rating = prompts.read_int(
            f"Enter the minimum rating ({MIN_RATING}-{MAX_RATING})",
            min_value=MIN_RATING,
            max_value=MAX_RATING,
            input_fn=self._in,
            output_fn=self._out,
        )
        self._print_lines(self._vm.min_rating_lines(min_rating))
        self._out(RECORD_SEPARATOR)

    def query_by_date(self) -> None:
        """Show photos taken after a chosen date."""
        self._out("\n--- Query: photos taken after a date ---")
        date = prompts.read_datetime(
            "Enter the date", just_date=True, input_fn=self._in, output_fn=self._out
        )
        self._print_lines(self._vm.taken_after_lines(date))
        self._out(RECORD_SEPARATOR)

    def query_total_count(self) -> None:
        """Show how many photos the catalog holds."""
        self._out("\n--- Query: total number of photos ---")
        self._out(self._vm.total_count_line())
        self._out(RECORD_SEPARATOR)

    def query_largest(self) -> None:
        """Show the photo with the largest file size."""
        self._out("\n--- Query: largest photo ---")
        self._print_lines(self._vm.largest_lines())
        self._out(RECORD_SEPARATOR)

    def _print_lines(self, lines: list[str]) -> None:
        for line in lines:
            self._out(line)
