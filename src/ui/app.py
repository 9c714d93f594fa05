# src/ui/app.py

"""Terminal UI for browsing and downloading the standard product catalog."""

import logging
from pathlib import Path
from typing import cast

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Select,
    SelectionList,
    Static,
)

from src.config.settings import Settings
from src.filters.product_sorter import next_sort
from src.models.view_state import FilterCriteria, SortSpec
from src.services.catalog_view import CatalogView, ViewResult, default_sort
from src.storage.catalog_store import CatalogStore
from src.storage.exporter import CatalogExporter

logger = logging.getLogger("assort_catalog.ui")

_SORT_MARKERS = {False: " ▲", True: " ▼"}


class CatalogApp(App[object]):
    """Terminal UI for browsing and downloading the standard product catalog."""

    CSS_PATH = "styles.css"
    TITLE = Settings.APP_TITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("x", "download('xlsx')", "Download .xlsx"),
        Binding("c", "download('csv')", "Download .csv"),
    ]

    def __init__(
        self,
        store: CatalogStore | None = None,
        data_path: str | Path | None = None,
        export_mode: str | None = None,
    ) -> None:
        super().__init__()
        if store is None:
            store = CatalogStore.load(Path(data_path) if data_path else None)
        self.store = store
        self.catalog_view = CatalogView(self.store)
        self.exporter = CatalogExporter(self.store, mode=export_mode)
        self.settings = Settings()

        self.selected_version: str | None = None
        self.criteria = FilterCriteria()
        self.sort: SortSpec | None = default_sort()
        self.result: ViewResult = self.catalog_view.render(
            None, self.criteria, self.sort
        )
        self._facet_version: str | None = None
        self.status_message: str = ""

    def compose(self) -> ComposeResult:
        """Build the widget tree for the TUI."""
        versions = self.catalog_view.versions
        facet_groups = [
            Vertical(
                Label(f"Filter by {facet['label']}:"),
                SelectionList[str](id=f"filter_{facet['id']}"),
                classes="facet_group",
            )
            for facet in self.settings.FACET_FIELDS
        ]

        yield Header()
        yield Container(
            Static(self.settings.APP_TITLE, id="title"),

            Horizontal(
                self._version_select(versions),
                id="version_bar",
            ),

            Label("Filter by Name:"),
            Input(placeholder="Search by name...", id="name_input"),

            Horizontal(*facet_groups, id="facet_filters"),

            DataTable(
                id="products_table",
                zebra_stripes=True,
                cursor_type="row",
            ),
            Static("", id="status"),

            Horizontal(
                Button(
                    "Download as .xlsx",
                    variant="primary",
                    id="download_xlsx",
                ),
                Button(
                    "Download as .csv",
                    variant="success",
                    id="download_csv",
                ),
                id="download_bar",
            ),
            id="main_container",
        )
        yield Footer()

    @staticmethod
    def _version_select(versions: list[str]) -> Select[str]:
        """Version dropdown, preselected to the first version."""
        if not versions:
            return Select[str]([], prompt="Select version", id="version_select")
        return Select[str](
            [(v, v) for v in versions],
            prompt="Select version",
            allow_blank=False,
            value=versions[0],
            id="version_select",
        )

    def on_mount(self) -> None:
        """Render the first version on startup."""
        self.refresh_view()

    # ── Event handlers ───────────────────────────────────

    def on_select_changed(self, event: Select.Changed) -> None:
        """Switch the visible version partition."""
        if event.select.id != "version_select":
            return
        value = event.value
        self.selected_version = value if isinstance(value, str) else None
        self.refresh_view()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-filter on every keystroke in the name box."""
        if event.input.id == "name_input":
            self.criteria = self.criteria.with_name(event.value)
            self.refresh_view()

    def on_selection_list_selected_changed(
        self, event: SelectionList.SelectedChanged[str],
    ) -> None:
        """Apply a checkbox toggle in one of the facet groups."""
        list_id = event.selection_list.id or ""
        facet = list_id.removeprefix("filter_")
        selection_list = cast(SelectionList[str], event.selection_list)

        shown = {
            selection_list.get_option_at_index(i).value
            for i in range(selection_list.option_count)
        }
        # Values not offered by this version stay selected
        hidden = self.criteria.allowed(facet) - shown
        selected = hidden | set(selection_list.selected)
        if selected != self.criteria.allowed(facet):
            self.criteria = self.criteria.with_facet(facet, selected)
            self.refresh_view()

    def on_data_table_header_selected(
        self, event: DataTable.HeaderSelected,
    ) -> None:
        """Cycle the sort order of the clicked column."""
        column = event.column_key.value
        if column is not None:
            self.set_sort_column(column)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle the download buttons."""
        if event.button.id == "download_xlsx":
            self.action_download("xlsx")
        elif event.button.id == "download_csv":
            self.action_download("csv")

    # ── View refresh ─────────────────────────────────────

    def set_sort_column(self, column: str) -> None:
        """Advance *column* through ascending, descending, unsorted."""
        self.sort = next_sort(self.sort, column)
        self.refresh_view()

    def refresh_view(self) -> None:
        """Recompute the derived view and redraw the table."""
        self.result = self.catalog_view.render(
            self.selected_version, self.criteria, self.sort
        )
        if self.result.version != self._facet_version:
            self._rebuild_facets()
            self._facet_version = self.result.version
        self.populate_table()

    def _rebuild_facets(self) -> None:
        """Offer the current version's distinct values in each group."""
        for facet in self.settings.FACET_FIELDS:
            selection_list = cast(
                SelectionList[str],
                self.query_one(f"#filter_{facet['id']}", SelectionList),
            )
            allowed = self.criteria.allowed(facet["id"])
            selection_list.clear_options()
            selection_list.add_options(
                [
                    (value, value, value in allowed)
                    for value in self.result.facets[facet["id"]]
                ]
            )

    def populate_table(self) -> None:
        """Fill the DataTable with the current view."""
        table = cast(
            DataTable[str],
            self.query_one("#products_table", DataTable),
        )
        table.clear(columns=True)
        for col in self.settings.COLUMNS:
            label = col["label"]
            if self.sort is not None and self.sort.column == col["id"]:
                label += _SORT_MARKERS[self.sort.descending]
            table.add_column(label, key=col["id"])

        for p in self.result.products:
            table.add_row(
                *(p.value_of(col["id"]) for col in self.settings.COLUMNS),
            )

        if self.result.is_empty:
            self.status_message = f"❌ {self.settings.EMPTY_STATE_MESSAGE}"
        else:
            self.status_message = (
                f"✅ {len(self.result.products)} of "
                f"{self.result.total_in_version} products"
                f" (version {self.result.version})"
            )
        self.query_one("#status", Static).update(self.status_message)

    # ── Actions ──────────────────────────────────────────

    def action_download(self, fmt: str) -> None:
        """Write the full catalog as data.<fmt>."""
        try:
            path = self.exporter.export(fmt)
            logger.info("Download written to %s", path)
            self.notify(f"Saved {path}")
        except (OSError, ValueError) as e:
            logger.error("Download failed", exc_info=True)
            self.notify(f"Download failed: {e}", severity="error")
