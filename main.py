# main.py
import logging
from dataclasses import replace

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.containers import Container
from textual.logging import TextualHandler
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input

from config import Config
from models import AppState
from services import WaybackSearchService
from ui import LogPane, ResultsPanel, SearchControls

logger = logging.getLogger(__name__)

def configure_logging(level: str) -> None:
    """Routes log records to the Textual devtools console (`textual console`)."""
    logging.basicConfig(level=level, handlers=[TextualHandler()])


class WaybackSearchApp(App):
    TITLE = "Wayback Machine Search"
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+l", "toggle_log", "Toggle log"),
    ]
    CSS_PATH = "wayback_search.tcss"

    app_state = reactive(AppState, always_update=True, init=False)

    def __init__(self, search_service: WaybackSearchService, config: Config):
        super().__init__()
        self.search_service = search_service
        self.config = config

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            yield SearchControls(id="search-controls")
            yield ResultsPanel(id="results-panel")
            yield LogPane(id="log", wrap=True, highlight=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(Input).focus()

    def watch_app_state(self, old_state: AppState, new_state: AppState) -> None:
        """Pushes every state change to the widgets."""
        self.query_one(SearchControls).update_state(new_state)
        self.query_one(ResultsPanel).update_results(new_state)

    def action_toggle_log(self) -> None:
        log = self.query_one(LogPane)
        log.display = not log.display

    # --- Operations ---
    def update_search_term(self, text: str) -> None:
        self.app_state = replace(self.app_state, search_term=text)

    def update_year_range(self, field_name: str, value: str) -> None:
        self.app_state = replace(self.app_state, year_range=self.app_state.year_range.with_field(field_name, value))

    async def submit_search(self) -> None:
        log = self.query_one(LogPane)
        if self.app_state.loading:
            logger.debug("Search already running, ignoring submit.")
            return

        term, year_range = self.app_state.search_term, self.app_state.year_range
        self.app_state = replace(self.app_state, loading=True)
        log.add_message(f"🔎 Searching for '{escape(term)}' ({year_range.start} - {year_range.end})...")
        try:
            results, error_details = await self.search_service.search(term, year_range)
            if error_details:
                log.add_message("[red]❌ An error occurred during search.[/red]")
                log.add_message(f"[dim]{escape(error_details)}[/dim]")
                return
            self.app_state = replace(self.app_state, results=results)
            log.add_message(f"📚 Received {len(results)} responses for '{escape(term)}'.")
        finally:
            self.app_state = replace(self.app_state, loading=False)

    # --- Message Handlers ---
    def on_search_controls_search_term_changed(self, message: SearchControls.SearchTermChanged) -> None:
        self.update_search_term(message.text)

    def on_search_controls_year_range_changed(self, message: SearchControls.YearRangeChanged) -> None:
        self.update_year_range(message.field_name, message.value)

    def on_search_controls_search_requested(self, message: SearchControls.SearchRequested) -> None:
        self.run_worker(self.submit_search(), group="search")


def main() -> None:
    app_config = Config()
    configure_logging(app_config.LOG_LEVEL)
    search_service = WaybackSearchService(app_config)

    app = WaybackSearchApp(search_service, app_config)
    app.run()


if __name__ == "__main__":
    main()
