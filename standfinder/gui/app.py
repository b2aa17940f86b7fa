"""Kivy frontend: URL field, stand result card and radar chart.

isort:skip_file
"""

from __future__ import annotations

# first, logging level lower
import logging
import os
import sys
from typing import Any, Sequence

os.environ["KCFG_KIVY_LOG_LEVEL"] = os.environ.get("KCFG_KIVY_LOG_LEVEL", "warning")

from kivy.app import App
from kivy.core.window import Window
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.gridlayout import GridLayout
from kivy.uix.label import Label
from kivy.uix.textinput import TextInput

from standfinder import __version__
from standfinder.common.settings import Settings
from standfinder.core.catalog import load_catalog
from standfinder.core.errors import StandFinderError
from standfinder.core.models import CatalogEntry, StatAxis
from standfinder.core.pipeline import StandResult, find_stand
from standfinder.gui.widgets.radar_chart import StandRadarWidget

_logger = logging.getLogger(__name__)

STAT_ROWS = (
    StatAxis.POWER,
    StatAxis.SPEED,
    StatAxis.RANGE,
    StatAxis.DURABILITY,
    StatAxis.PRECISION,
    StatAxis.POTENTIAL,
)


class StandFinderRoot(BoxLayout):
    """Root layout. Holds the catalog and the last successful result."""

    def __init__(self, settings: Settings, catalog: Sequence[CatalogEntry], **kwargs: Any) -> None:
        super().__init__(orientation="vertical", padding=10, spacing=8, **kwargs)
        self._settings = settings
        self._catalog = tuple(catalog)
        self.result: StandResult | None = None

        form_row = BoxLayout(size_hint_y=None, height=40, spacing=8)
        self.url_input = TextInput(text=settings.last_url, multiline=False, hint_text="Chart URL")
        self.url_input.bind(on_text_validate=self.on_submit)
        submit = Button(text="Find my stand", size_hint_x=None, width=140)
        submit.bind(on_release=self.on_submit)
        form_row.add_widget(self.url_input)
        form_row.add_widget(submit)
        self.add_widget(form_row)

        self.status = Label(text=f"{len(self._catalog)} stands loaded", size_hint_y=None, height=24)
        self.add_widget(self.status)

        self.stand_name = Label(text="", bold=True, font_size=22, size_hint_y=None, height=34)
        self.add_widget(self.stand_name)

        stats = GridLayout(cols=2, size_hint_y=None, height=6 * 24)
        self.stat_labels: dict[StatAxis, Label] = {}
        for axis in STAT_ROWS:
            stats.add_widget(Label(text=f"{axis.value.capitalize()}:", size_hint_y=None, height=24))
            value = Label(text="", size_hint_y=None, height=24)
            self.stat_labels[axis] = value
            stats.add_widget(value)
        self.add_widget(stats)

        self.chart = StandRadarWidget(size_hint=(None, None), size=(settings.canvas_size, settings.canvas_size))
        chart_row = BoxLayout(size_hint_y=None, height=settings.canvas_size)
        chart_row.add_widget(Label())
        chart_row.add_widget(self.chart)
        chart_row.add_widget(Label())
        self.add_widget(chart_row)

    def on_submit(self, *_args: Any) -> None:
        url = self.url_input.text
        try:
            result = find_stand(url, self._catalog)
        except StandFinderError as e:
            # Previous result stays on screen
            _logger.warning("Lookup failed: %s", e)
            self.status.text = e.user_message
            return

        self.show_result(result)
        self._settings.last_url = url.strip()
        try:
            self._settings.save()
        except OSError as e:
            _logger.warning("Could not save settings: %s", e)

    def show_result(self, result: StandResult) -> None:
        self.result = result
        labels = result.stand.levels.labels()
        self.stand_name.text = result.headline
        for axis, label in self.stat_labels.items():
            label.text = labels[axis.value]
        self.chart.levels = result.stand.levels
        self.status.text = result.summary


class StandFinderApp(App):
    def __init__(self, settings: Settings | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.settings_store = settings if settings is not None else Settings()

    def build(self) -> StandFinderRoot:
        self.title = f"Stand Finder v{__version__}"
        Window.clearcolor = (0.15, 0.15, 0.15, 1)
        catalog = load_catalog(self.settings_store.catalog_path)
        return StandFinderRoot(self.settings_store, catalog)


def run_app() -> None:
    logging.basicConfig(
        level=getattr(logging, os.environ.get("STANDFINDER_LOGLEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    try:
        StandFinderApp().run()
    except StandFinderError as e:
        _logger.error("Cannot start: %s", e)
        print(f"ERROR: {e.user_message}", file=sys.stderr)
        sys.exit(2)
