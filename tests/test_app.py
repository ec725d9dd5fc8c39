"""
test_app.py — Smoke tests for the Streamlit form, driven through AppTest.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "app.py")


def _metric(at, label):
    return next(m for m in at.metric if m.label == label).value


@pytest.fixture
def app(monkeypatch, restore_root_logger):
    monkeypatch.delenv("TRAINING_QUOTE_TRAVEL_COSTING", raising=False)
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.run()
    assert not at.exception
    return at


class TestQuoteForm:

    def test_default_quote(self, app):
        assert _metric(app, "Subtotal") == "$500"
        assert _metric(app, "Total") == "$650"
        assert len(app.session_state["trainers"]) == 1

    def test_add_trainer(self, app):
        app.button(key="add_trainer").click().run()
        assert not app.exception
        assert len(app.session_state["trainers"]) == 2
        # lead 500 + trainer 350, plus 30%
        assert _metric(app, "Total") == "$1,105"

    def test_remove_trainer(self, app):
        app.button(key="add_trainer").click().run()
        app.button(key="remove_2").click().run()
        assert not app.exception
        assert [t.id for t in app.session_state["trainers"]] == [1]

    def test_virtual_training(self, app):
        app.radio(key="training_type").set_value("virtual").run()
        assert not app.exception
        assert _metric(app, "Total") == "$390"

    def test_count_and_pm_hours(self, app):
        app.number_input(key="count_1").set_value(2).run()
        app.number_input(key="pm_hours").set_value(2.0).run()
        assert not app.exception
        # 2 x 500 + 2h x 125 = 1,250 subtotal
        assert _metric(app, "Subtotal") == "$1,250"
        assert _metric(app, "Total") == "$1,625"

    def test_flat_fee_travel(self, app):
        app.radio(key="travel_costing").set_value("flat-fee").run()
        app.selectbox(key="travel_time").set_value("Full day").run()
        assert not app.exception
        # 500 fee + 500 travel, plus 30%
        assert _metric(app, "Total") == "$1,300"

    def test_miles_fill_mileage_cost(self, app):
        app.selectbox(key="location_1").set_value("traveling").run()
        app.number_input(key="miles_1").set_value(100.0).run()
        assert not app.exception
        assert app.session_state["trainers"][0].travel.mileage_cost == 67.0
        # 500 fee + 67 mileage, plus 30%
        assert _metric(app, "Total") == "$737.1"

    def test_meal_days_fill_meal_allowance(self, app):
        app.selectbox(key="location_1").set_value("traveling").run()
        app.number_input(key="meal_days_1").set_value(2).run()
        assert not app.exception
        assert app.session_state["trainers"][0].travel.meal_allowance == 150
        # 500 fee + 150 meals, plus 30%
        assert _metric(app, "Total") == "$845"
