# ui.py
from typing import Any, List

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Button, Input, Label, RichLog, Select, Static

from models import END_YEAR_CHOICES, START_YEAR_CHOICES, AppState, ResultRecord

class SearchControls(Static):
    """Widget for the search input, the year range and the search button."""
    class SearchTermChanged(Message):
        def __init__(self, text: str) -> None:
            self.text = text
            super().__init__()

    class YearRangeChanged(Message):
        def __init__(self, field_name: str, value: str) -> None:
            self.field_name = field_name
            self.value = value
            super().__init__()

    class SearchRequested(Message):
        pass

    def compose(self) -> ComposeResult:
        yield Input(placeholder="Search for words", id="search-input")
        with Horizontal(id="year-range"):
            with Vertical(classes="year-field"):
                yield Label("START YEAR", classes="year-label")
                yield Select(START_YEAR_CHOICES, allow_blank=False, value=START_YEAR_CHOICES[0][1],
                             name="start", id="start-year")
            with Vertical(classes="year-field"):
                yield Label("END YEAR", classes="year-label")
                yield Select(END_YEAR_CHOICES, allow_blank=False, value=END_YEAR_CHOICES[0][1],
                             name="end", id="end-year")
        yield Button("Search", variant="primary", id="search-button")

    def on_input_changed(self, event: Input.Changed) -> None:
        self.post_message(self.SearchTermChanged(event.value))

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.name:
            self.post_message(self.YearRangeChanged(event.select.name, str(event.value)))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.post_message(self.SearchRequested())

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.post_message(self.SearchRequested())

    def update_state(self, state: AppState) -> None:
        search_input = self.query_one(Input)
        if search_input.value != state.search_term:
            with search_input.prevent(Input.Changed):
                search_input.value = state.search_term
        for select_id, value in (("#start-year", state.year_range.start), ("#end-year", state.year_range.end)):
            select = self.query_one(select_id, Select)
            if select.value != value:
                select.value = value
        button = self.query_one(Button)
        button.label = "Searching..." if state.loading else "Search"
        button.disabled = state.loading


class ResultBlock(Static):
    """One result: its title as a heading, its description below."""
    def __init__(self, record: ResultRecord) -> None:
        super().__init__(classes="result")
        self.record = record

    def compose(self) -> ComposeResult:
        yield Label(self.record.heading, markup=False, classes="result-title")
        yield Label(self.record.body, markup=False, classes="result-description")


class ResultsPanel(VerticalScroll):
    """Shows the results, or only a loading line while a search runs."""
    results: reactive[List[Any]] = reactive(list, recompose=True)
    searching: reactive[bool] = reactive(False, recompose=True)

    def compose(self) -> ComposeResult:
        yield Label("Results", id="results-heading")
        if self.searching:
            yield Label("Loading...", id="loading-indicator")
            return
        for payload in self.results:
            yield ResultBlock(ResultRecord.from_payload(payload))

    def update_results(self, state: AppState) -> None:
        self.searching = state.loading
        self.results = list(state.results)


class LogPane(RichLog):
    """Operator log for search activity and failures."""
    def add_message(self, message: str) -> None:
        self.write(message)
