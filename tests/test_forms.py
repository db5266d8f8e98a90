"""Streamlit app tests for the dependents editor."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP = str(Path(__file__).resolve().parent.parent / "app.py")
TIMEOUT = 30


def _app_with_rows(rows):
    at = AppTest.from_file(APP, default_timeout=TIMEOUT)
    at.session_state["dependent_rows"] = rows
    at.run()
    return at


def test_deleting_first_row_keeps_the_second_rows_values():
    at = _app_with_rows([
        {"id": 0, "age": 1, "kind": "descendant", "disability": 0},
        {"id": 1, "age": 80, "kind": "ascendant", "disability": 65},
    ])
    assert not at.exception

    at.button(key="dep_del_0").click().run()

    assert at.session_state["dependent_rows"] == [
        {"id": 1, "age": 80, "kind": "ascendant", "disability": 65},
    ]
    assert at.number_input(key="dep_age_1").value == 80
    assert at.selectbox(key="dep_kind_1").value == "ascendant"
    assert at.selectbox(key="dep_dis_1").value == 65


def test_added_row_gets_a_fresh_id():
    at = _app_with_rows([{"id": 0, "age": 7, "kind": "descendant", "disability": 0}])

    at.button(key="dep_add").click().run()

    rows = at.session_state["dependent_rows"]
    assert [r["id"] for r in rows] == [0, 1]
    assert rows[0]["age"] == 7
    assert rows[1]["age"] == 0


def test_rows_without_ids_are_numbered():
    at = _app_with_rows([{"age": 3, "kind": "descendant", "disability": 0}])
    assert at.session_state["dependent_rows"][0]["id"] == 0
    assert at.number_input(key="dep_age_0").value == 3
